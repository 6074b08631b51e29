from structgen.shared.errors import (
    CodegenError,
    ConfigError,
    ConnectivityError,
    OutputError,
)


class TestConnectivityError:
    def test_init_no_table(self):
        error = ConnectivityError("connection refused")
        assert str(error) == "connection refused"
        assert error.table is None

    def test_init_with_table(self):
        error = ConnectivityError("query failed", "users")
        assert str(error) == "Table 'users': query failed"
        assert error.table == "users"

    def test_is_codegen_error(self):
        assert isinstance(ConnectivityError("x"), CodegenError)


class TestOutputError:
    def test_init_no_path(self):
        error = OutputError("disk full")
        assert str(error) == "disk full"
        assert error.path is None

    def test_init_with_path(self):
        error = OutputError("permission denied", "bunmodels/users_struct.go")
        assert str(error) == "[bunmodels/users_struct.go] permission denied"
        assert error.path == "bunmodels/users_struct.go"

    def test_is_not_builtin_oserror(self):
        assert not isinstance(OutputError("x"), OSError)
        assert isinstance(OutputError("x"), CodegenError)


class TestConfigError:
    def test_init_no_path(self):
        error = ConfigError("bad value")
        assert str(error) == "bad value"
        assert error.config_path is None

    def test_init_with_path(self):
        error = ConfigError("bad value", "structgen.yaml")
        assert str(error) == "[structgen.yaml] bad value"
        assert error.config_path == "structgen.yaml"
