"""Statement executors and the table gateway built on them."""

from .gateway import TableGateway, log_statement
from .mysql_client import MysqlClient

__all__ = ["MysqlClient", "TableGateway", "log_statement"]
