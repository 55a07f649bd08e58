"""
Pytest fixtures for PRD wizard tests.
"""

import io
import locale
import logging

import pytest
from rich.console import Console

from prd_wizard.answers import Answers
from prd_wizard.choices import AuthChoice, DatabaseChoice


@pytest.fixture
def todo_app_lines():
    """Answers for a complete run, one per prompt in wizard order."""
    return [
        "Todo App",           # app name
        "too many lists",     # problem
        "busy people",        # target users
        "one list to rule them all",  # unique value
        "Manager Mike",       # persona name
        "30-45",              # age range
        "stay organized",     # needs
        "scattered notes",    # pain points
        "add task",           # feature 1
        "delete task",        # feature 2
        "",                   # feature 3
        "",                   # feature 4
        "",                   # feature 5
        "2",                  # database
        "9",                  # auth (invalid)
        "8 weeks",            # timeline
        "2027-01-15",         # MVP date
        "1000",               # user target
        "",                   # revenue target
    ]


@pytest.fixture
def scripted_input():
    """Factory for input streams that answer prompts line by line."""
    def create_stream(lines):
        return io.StringIO("".join(f"{line}\n" for line in lines))
    return create_stream


class RecordingConsole(Console):
    """Plain-text console that keeps everything printed to it."""

    def __init__(self):
        super().__init__(file=io.StringIO(), width=200, color_system=None, force_terminal=False)

    @property
    def text(self) -> str:
        return self.file.getvalue()


@pytest.fixture
def recording_console():
    """Console capturing prompt output."""
    return RecordingConsole()


@pytest.fixture
def sample_answers():
    """Fully populated answers."""
    return Answers(
        app_name="Todo App",
        problem="too many lists",
        target_users="busy people",
        unique_value="one list to rule them all",
        persona_name="Manager Mike",
        persona_age="30-45",
        persona_needs="stay organized",
        persona_pain_points="scattered notes",
        features=["Add Task", "Delete Task", "Share List", "Set Reminders", "Sync Devices"],
        database=DatabaseChoice.MONGODB,
        auth=AuthChoice.CLERK,
        timeline="8 weeks",
        mvp_date="2027-01-15",
        user_target="1000",
        revenue_target="$5k MRR",
    )



@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    package_logger = logging.getLogger('prd_wizard')
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def restore_time_locale():
    """Undo LC_TIME changes made by the CLI or by locale tests."""
    saved = locale.setlocale(locale.LC_TIME)
    yield
    locale.setlocale(locale.LC_TIME, saved)


@pytest.fixture
def time_locale():
    """Switch LC_TIME to the first installed locale from a list, or skip."""
    def switch(*names):
        for name in names:
            try:
                return locale.setlocale(locale.LC_TIME, name)
            except locale.Error:
                continue
        pytest.skip(f"None of these locales is installed: {', '.join(names)}")
    return switch
