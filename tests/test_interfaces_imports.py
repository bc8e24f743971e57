def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import devtool.core.interfaces as I

    assert hasattr(I, "InputReaderProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "TextReformatterProtocol")


def test_factory_loggers_satisfy_logger_protocol():
    import io

    from devtool.core.interfaces import LoggerLikeProtocol
    from devtool.logging.factory import DefaultLoggerFactory
    from devtool.logging.helpers import setup_base_logger

    try:
        lg = DefaultLoggerFactory(stream=io.StringIO()).get_logger("tests")
        assert isinstance(lg, LoggerLikeProtocol)
        assert lg.name == "devtool.tests"
    finally:
        setup_base_logger()


def test_services_accept_any_logger_like_object():
    from devtool.processing.envctx import EnvKeyChecker

    class Recorder:
        def __init__(self):
            self.calls = []

        def debug(self, msg, *args, extra=None):
            self.calls.append(("debug", msg % args))

        def warning(self, msg, *args, extra=None):
            self.calls.append(("warning", msg % args))

        def error(self, msg, *args, extra=None):
            self.calls.append(("error", msg % args))

    rec = Recorder()
    assert EnvKeyChecker(logger=rec).read_keys("/nonexistent/.env") == set()
    assert rec.calls and rec.calls[0][0] == "warning"


def test_reformatter_matches_module_functions():
    from devtool.processing.reformat import Reformatter, render, strip

    fmt = Reformatter()
    src = '{"a": [1, 2]} // c'
    assert fmt.strip(src) == strip(src)
    assert fmt.render(fmt.strip(src)) == render(strip(src))
