"""
Identity column strategies describing how database-generated keys are declared,
inserted and read back for each vendor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class SqlType(IntEnum):
    """
    Type codes compatible with ``java.sql.Types``, used to pick identity DDL.
    """

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    OTHER = 1111


class IdentityColumnSupport:
    """
    Identity support for vendors without identity columns.

    Every query answers "unsupported". Callers check
    :meth:`supports_identity_columns` and :meth:`supports_insert_select_identity`
    before asking for SQL fragments.
    """

    def supports_identity_columns(self) -> bool:
        return False

    def supports_insert_select_identity(self) -> bool:
        return False

    def has_data_type_in_identity_column(self) -> bool:
        return False

    def identity_select_string(self, table: str, column: str, sql_type: int) -> str | None:
        return None

    def identity_column_string(self, sql_type: int) -> str | None:
        return None

    def identity_insert_string(self) -> str | None:
        return None

    def append_identity_select_to_insert(self, insert_sql: str) -> str:
        return insert_sql


@dataclass(frozen=True)
class IdentityColumns(IdentityColumnSupport):
    """
    Table-driven identity support for a vendor that has identity columns.

    ``select_template`` may reference ``{table}`` and ``{column}``. The
    ``bigint_*`` variants apply to ``SqlType.BIGINT`` columns when set.
    ``insert_select_suffix`` is appended to inserts that return the generated
    key in the same round-trip.
    """

    column_string: str
    select_template: str | None = None
    bigint_column_string: str | None = None
    bigint_select_template: str | None = None
    insert_string: str | None = None
    data_type_in_column: bool = True
    insert_select_suffix: str | None = None

    def supports_identity_columns(self) -> bool:
        return True

    def supports_insert_select_identity(self) -> bool:
        return self.insert_select_suffix is not None

    def has_data_type_in_identity_column(self) -> bool:
        return self.data_type_in_column

    def identity_select_string(self, table: str, column: str, sql_type: int) -> str | None:
        template = self.select_template
        if sql_type == SqlType.BIGINT and self.bigint_select_template is not None:
            template = self.bigint_select_template
        if template is None:
            return None
        return template.format(table=table, column=column)

    def identity_column_string(self, sql_type: int) -> str | None:
        if sql_type == SqlType.BIGINT and self.bigint_column_string is not None:
            return self.bigint_column_string
        return self.column_string

    def identity_insert_string(self) -> str | None:
        return self.insert_string

    def append_identity_select_to_insert(self, insert_sql: str) -> str:
        if self.insert_select_suffix is None:
            return insert_sql
        return insert_sql + self.insert_select_suffix


NO_IDENTITY_COLUMNS = IdentityColumnSupport()

MYSQL_IDENTITY = IdentityColumns(
    column_string="not null auto_increment",
    select_template="select last_insert_id()",
)

POSTGRES_SERIAL_IDENTITY = IdentityColumns(
    column_string="serial not null",
    bigint_column_string="bigserial not null",
    select_template="select currval('{table}_{column}_seq')",
    data_type_in_column=False,
)

POSTGRES_IDENTITY = IdentityColumns(
    column_string="generated by default as identity",
    select_template="select currval('{table}_{column}_seq')",
)

# generated keys come back through the driver, there is no follow-up select
ORACLE_IDENTITY = IdentityColumns(
    column_string="generated as identity",
    insert_string="default",
)

TRANSACT_SQL_IDENTITY = IdentityColumns(
    column_string="identity not null",
    select_template="select @@identity",
    insert_select_suffix="\nselect @@identity",
)

SQLSERVER_IDENTITY = IdentityColumns(
    column_string="identity not null",
    select_template="select @@identity",
    insert_select_suffix=" select scope_identity()",
)

DB2_IDENTITY = IdentityColumns(
    column_string="generated by default as identity",
    select_template="values identity_val_local()",
    insert_string="default",
)

DB2_SYSDUMMY_IDENTITY = IdentityColumns(
    column_string="generated by default as identity",
    select_template="select identity_val_local() from sysibm.sysdummy1",
    insert_string="default",
)

H2_IDENTITY = IdentityColumns(
    column_string="generated by default as identity",
    select_template="call identity()",
    insert_string="null",
)

HSQL_IDENTITY = IdentityColumns(
    column_string="generated by default as identity (start with 1)",
    select_template="call identity()",
    insert_string="default",
)

INFORMIX_IDENTITY = IdentityColumns(
    column_string="serial not null",
    bigint_column_string="serial8 not null",
    select_template="select dbinfo('sqlca.sqlerrd1') from informix.systables where tabid=1",
    bigint_select_template="select dbinfo('bigserial') from informix.systables where tabid=1",
    data_type_in_column=False,
)

INGRES_IDENTITY = IdentityColumns(
    column_string="not null generated by default as identity",
    select_template="select last_identity()",
    insert_string="default",
)

CUBRID_IDENTITY = IdentityColumns(
    column_string="not null auto_increment",
    select_template="select last_insert_id()",
    insert_string="NULL",
)

SQLITE_IDENTITY = IdentityColumns(
    column_string="integer",
    select_template="select last_insert_rowid()",
    data_type_in_column=False,
)
