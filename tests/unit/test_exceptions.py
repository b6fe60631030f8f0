from ddb_table.exceptions import (
    ConfigurationError,
    ConversionError,
    DDBTableError,
    ItemNotFoundError,
    ScanError,
    ValidationError,
)


class TestDDBTableError:

    def test_str_without_context(self):
        assert str(DDBTableError("plain")) == "plain"

    def test_str_with_context(self):
        error = DDBTableError("failed", context={'table_name': 'users', 'key': 'u-1'})

        assert str(error) == "failed (Context: table_name=users, key=u-1)"

    def test_repr(self):
        cause = RuntimeError("boom")
        error = DDBTableError("failed", original_error=cause)

        assert repr(error) == "DDBTableError(message='failed', original_error=RuntimeError('boom'), context={})"

    def test_build_context_leaves_out_unset_values(self):
        context = DDBTableError.build_context(path="a.b", value_type=None, fields=[], retryable=False, code="X")

        assert context == {'path': 'a.b', 'code': 'X'}

    def test_context_is_copied(self):
        details = {'table_name': 'users'}
        error = DDBTableError("failed", context=details)
        details['key'] = 'u-1'

        assert error.context == {'table_name': 'users'}

    def test_subclasses_skip_unset_context(self):
        assert ConversionError("bad").context == {}
        assert ValidationError("bad").context == {}
        assert str(ConfigurationError("bad")) == "bad"
        assert ScanError("boom", operation="Scan").context == {'operation': 'Scan'}


class TestDomainExceptions:

    def test_all_errors_share_base(self):
        for error in (
            ConfigurationError("x"),
            ConversionError("x"),
            ItemNotFoundError("users", {'user_id': 'u-1'}),
            ScanError("x", operation="Scan"),
            ValidationError("x"),
        ):
            assert isinstance(error, DDBTableError)

    def test_item_not_found_message(self):
        error = ItemNotFoundError("users", {'user_id': 'u-1'})

        assert error.message == "Item not found in table 'users' with key: {'user_id': 'u-1'}"
        assert error.context == {'table_name': 'users', 'key': {'user_id': 'u-1'}}

    def test_not_found_is_not_an_operation_failure(self):
        from ddb_table.exceptions import OperationError

        assert not isinstance(ItemNotFoundError("users", {}), OperationError)

    def test_conversion_error_context(self):
        error = ConversionError("bad", path="a.b", value_type="bytes")

        assert error.context == {'path': 'a.b', 'value_type': 'bytes'}

    def test_configuration_error_fields(self):
        error = ConfigurationError("bad", fields=['region'])

        assert error.fields == ['region']
        assert "fields=['region']" in str(error)

    def test_scan_error_attributes(self):
        error = ScanError("Scan on users: boom", operation="Scan", table_name="users", error_code="InternalServerError", retryable=True)

        assert error.context == {
            'operation': 'Scan',
            'table_name': 'users',
            'error_code': 'InternalServerError',
            'retryable': True,
        }
