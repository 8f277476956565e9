import pytest

from dialectkit.dialects import DbType, MySQLDialect
from dialectkit.errors import UnsupportedTypeError


def test_mysql_dialect_quotes_identifiers():
    dialect = MySQLDialect()
    assert dialect.quote_identifier("user`name") == "`user``name`"
    assert dialect.unquote_identifier("`user``name`") == "user`name"
    assert dialect.format_table("analytics.events") == "`analytics`.`events`"


def test_mysql_pagination():
    dialect = MySQLDialect()
    assert dialect.render_pagination("select 1", 0, 10) == "select 1 limit 10"
    assert dialect.render_pagination("select 1", 5, 0) == "select 1 limit 18446744073709551615 offset 5"
    assert dialect.render_pagination("select 1", 5, 10) == "select 1 limit 10 offset 5"
    assert dialect.render_pagination("select 1", 0, 0) == "select 1"


def test_mysql_placeholder():
    assert MySQLDialect().parameter_placeholder() == "%s"


def test_mysql_foreign_key_drop_uses_foreign_key_keyword():
    assert MySQLDialect().render_drop_foreign_key_constraint("fk_orders") == " drop foreign key fk_orders"


def test_mysql_types():
    dialect = MySQLDialect()
    assert dialect.resolve_type_name(DbType.BOOLEAN) == "tinyint(1)"
    assert dialect.resolve_type_name(DbType.ANSI_STRING, 64) == "varchar(64)"
    assert dialect.render_identity_column("id") == "`id` int auto_increment"
    with pytest.raises(UnsupportedTypeError):
        dialect.resolve_type_name(DbType.XML)
