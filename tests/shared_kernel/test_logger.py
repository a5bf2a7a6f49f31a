"""
Тесты для консольного логгера.
"""
from domain_labs.shared_kernel import ConsoleLogger


def test_info_goes_to_stdout(capsys):
    ConsoleLogger().info("Создана подборка")
    captured = capsys.readouterr()
    assert "[INFO] Создана подборка" in captured.out
    assert captured.err == ""


def test_debug_goes_to_stdout(capsys):
    ConsoleLogger().debug("Отладка")
    assert "[DEBUG] Отладка" in capsys.readouterr().out


def test_warning_and_error_go_to_stderr(capsys):
    logger = ConsoleLogger()
    logger.warning("Книги нет в подборке")
    logger.error("Ошибка при добавлении отзыва")
    captured = capsys.readouterr()
    assert "[WARNING] Книги нет в подборке" in captured.err
    assert "[ERROR] Ошибка при добавлении отзыва" in captured.err
    assert captured.out == ""


def test_context_is_printed_as_json(capsys):
    ConsoleLogger().info("Добавлен отзыв", rating=5, name="Классика")
    out = capsys.readouterr().out
    assert "Context:" in out
    assert '"rating": 5' in out
    assert '"name": "Классика"' in out
