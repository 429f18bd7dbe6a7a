"""Services package - Import pipeline and read queries for the catalog store.

Architecture:
- Services: Stateless functions organized by entity (category, product, store, inventory)
- Transactions: One session_scope() per store call, via ImportContext.store_call()
- Exceptions: Consistent error handling via the ServiceError hierarchy
- Validation: Required-field checks (utils.validators) before any write

Service Modules:
- category_import_service: Category CSV -> two-level category tree
- product_import_service: Product CSV -> products with variants
- store_import_service: Placeholder dark store
- inventory_import_service: Placeholder stock and prices for the first store
- catalog_service: Category and product listings for the read API

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- database: Engine, session factory and session_scope()
- import_context: Per-run options (path, session factory, logger, deadline)
- tabular_reader: CSV reading and header binding
- reference_resolver: Previously imported documents (find / find-or-create)
- error_aggregator: Deferred per-row errors
- bulk_writer: Single-transaction writes
"""

# Infrastructure only; the import services depend on utils.validators,
# which itself imports this package's exceptions module.
from . import exceptions, logging_utils, database, import_context

from .database import build_database_url, open_store, session_scope
from .import_context import ImportContext

__all__ = [
    "build_database_url",
    "open_store",
    "session_scope",
    "ImportContext",
]
