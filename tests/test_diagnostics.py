from pycos.diagnostics import (
    Diagnostic,
    DiagnosticHandler,
    DiagnosticType,
    LogContext,
    LogLevel,
    default_diagnostic_handler,
    default_log_context,
    logger_diagnostic_handler,
)


def _recording_context(level):
    records = []

    def record(context, message_level, message):
        records.append((context, message_level, message))

    return LogContext(level, record), records


def test_log_passes_messages_at_or_below_level():
    context, records = _recording_context(LogLevel.WARNING)
    context.log(LogLevel.ERROR, "bad")
    context.log(LogLevel.WARNING, "careful")
    context.log(LogLevel.INFO, "chatty")
    assert [(level, msg) for _, level, msg in records] == [
        (LogLevel.ERROR, "bad"),
        (LogLevel.WARNING, "careful"),
    ]
    assert all(ctx is context for ctx, _, _ in records)


def test_log_level_none_filters_everything():
    context, records = _recording_context(LogLevel.NONE)
    context.log(LogLevel.FATAL, "fatal")
    assert records == []


def test_log_formats_arguments():
    context, records = _recording_context(LogLevel.TRACE)
    context.log(LogLevel.TRACE, "%d objects in %s", 3, "xref")
    assert records[0][2] == "3 objects in xref"


def test_level_can_be_changed():
    context, records = _recording_context(LogLevel.ERROR)
    context.log(LogLevel.INFO, "hidden")
    context.level = LogLevel.INFO
    context.log(LogLevel.INFO, "shown")
    assert [msg for _, _, msg in records] == ["shown"]


def test_user_data_is_kept():
    context = LogContext(LogLevel.INFO, None, {"name": "parser"})
    assert context.user_data == {"name": "parser"}


def test_default_output_format(capsys):
    context = LogContext(LogLevel.TRACE)
    context.log(LogLevel.WARNING, "hi")
    context.log(LogLevel.FATAL, "boom")
    assert capsys.readouterr().out == "[WARNING] hi\n[FATAL] boom\n"


def test_default_log_context_is_shared_and_info_level():
    assert default_log_context() is default_log_context()
    assert default_log_context().level == LogLevel.INFO


def test_default_log_context_filters_trace(capsys):
    default_log_context().log(LogLevel.TRACE, "noise")
    default_log_context().log(LogLevel.INFO, "note")
    assert capsys.readouterr().out == "[INFO] note\n"


def test_handler_emits_to_function():
    received = []
    handler = DiagnosticHandler(lambda h, d: received.append((h, d)), user_data="ctx")
    handler.diagnose(DiagnosticType.ERROR, "broken xref")
    assert received == [(handler, Diagnostic(DiagnosticType.ERROR, "broken xref"))]
    assert handler.user_data == "ctx"


def test_handler_emit_passes_same_diagnostic():
    received = []
    handler = DiagnosticHandler(lambda h, d: received.append(d))
    diagnostic = Diagnostic(DiagnosticType.WARNING, "odd token")
    handler.emit(diagnostic)
    assert received[0] is diagnostic


def test_handler_without_function_outputs_nothing(capsys):
    handler = DiagnosticHandler()
    handler.diagnose(DiagnosticType.WARNING, "ignored")
    assert capsys.readouterr().out == ""


def test_default_diagnostic_handler_prints(capsys):
    handler = default_diagnostic_handler()
    assert handler is default_diagnostic_handler()
    handler.diagnose(DiagnosticType.WARNING, "w")
    handler.diagnose(DiagnosticType.ERROR, "e")
    assert capsys.readouterr().out == "warning: w\nerror: e\n"


def test_logger_handler_maps_levels():
    context, records = _recording_context(LogLevel.TRACE)
    handler = logger_diagnostic_handler(context)
    assert handler.user_data is context
    handler.diagnose(DiagnosticType.WARNING, "first")
    handler.diagnose(DiagnosticType.ERROR, "second")
    assert [(level, msg) for _, level, msg in records] == [
        (LogLevel.WARNING, "Error"),
        (LogLevel.ERROR, "Error"),
    ]


def test_logger_handler_respects_context_level():
    context, records = _recording_context(LogLevel.ERROR)
    logger_diagnostic_handler(context).diagnose(DiagnosticType.WARNING, "dropped")
    assert records == []