"""
Interactive prompt sequence for the PRD wizard.

The wizard asks a fixed series of questions over a single interactive
session. Answers are accepted as typed; the only interpretation applied is
the default fallback of the two technology menus.
"""

import logging
from typing import List, Optional, TextIO, Type

from rich.console import Console

from .answers import Answers, MAX_FEATURES
from .choices import AuthChoice, DatabaseChoice, MenuChoice


logger = logging.getLogger(__name__)

# Output styles
BANNER_STYLE = "bold blue"
SECTION_STYLE = "yellow"
INFO_STYLE = "blue"
SUCCESS_STYLE = "green"


class SessionClosedError(RuntimeError):
    """Raised when a prompt is issued on a closed session."""


class PromptSession:
    """
    Interactive question/answer channel.

    Used as a context manager so the session is released on every exit
    path, including errors and Ctrl+C:

        with PromptSession() as session:
            answers = collect_answers(session)
    """

    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None):
        """
        Initialize the session.

        Args:
            console: Console for prompts and messages (default: stdout)
            stream: Input stream to read answers from (default: stdin via input())
        """
        self.console = console or Console()
        self.stream = stream
        self.closed = False
        self.questions_asked = 0

    def __enter__(self) -> "PromptSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the session. Safe to call more than once."""
        if self.closed:
            return
        self.closed = True
        logger.debug(f"Prompt session closed after {self.questions_asked} questions")

    def ask(self, question: str) -> str:
        """
        Ask a question and wait for one line of input.

        Args:
            question: Prompt text, printed without a trailing newline

        Returns:
            The entered line without its line break, or "" at end of input
        """
        if self.closed:
            raise SessionClosedError("Prompt session is closed")

        self.questions_asked += 1
        try:
            line = self.console.input(question, markup=False, emoji=False, stream=self.stream)
        except EOFError:
            line = ""
        return line.rstrip("\r\n")

    def banner(self, text: str) -> None:
        self.console.print(text, style=BANNER_STYLE, markup=False)
        self.console.print()

    def section(self, title: str) -> None:
        """Print a section header, separated from the previous section."""
        if self.questions_asked:
            self.console.print()
        self.console.print(title, style=SECTION_STYLE, markup=False)

    def info(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False)

    def success(self, text: str) -> None:
        self.console.print()
        self.console.print(text, style=SUCCESS_STYLE, markup=False)

    def ask_features(self, count: int = MAX_FEATURES) -> List[str]:
        """
        Ask for a fixed number of features.

        Exactly ``count`` prompts are issued; blank answers are dropped and
        the rest keep their submitted order.
        """
        features = []
        for i in range(1, count + 1):
            feature = self.ask(f"Feature {i}: ")
            if feature:
                features.append(feature)
        return features

    def ask_choice(self, choice_cls: Type[MenuChoice], heading: str) -> MenuChoice:
        """
        Show a numbered menu and resolve the selection.

        Invalid selections are not re-asked; they resolve to the menu's
        default member.
        """
        self.info(heading)
        for line in choice_cls.menu_lines():
            self.info(line)
        raw = self.ask(f"Enter number (1-{len(choice_cls)}): ")

        choice = choice_cls.resolve(raw)
        if choice.code != raw:
            logger.debug(f"{choice_cls.__name__}: selection {raw!r} not recognized, "
                         f"using default {choice.label!r}")
        return choice


def collect_answers(session: PromptSession) -> Answers:
    """
    Run the full question sequence.

    Order: basic information, persona, features, database menu,
    authentication menu, timeline, success metrics.

    Args:
        session: Open prompt session

    Returns:
        Populated Answers
    """
    session.banner("🚀 PRD Generator - Let's define your app!")

    session.section("📋 Basic Information")
    app_name = session.ask("What is your app name? ")
    problem = session.ask("What problem does it solve? (one sentence) ")
    target_users = session.ask("Who are your target users? ")
    unique_value = session.ask("What makes it unique? ")

    session.section("👥 User Personas")
    session.info("Define your primary user persona:")
    persona_name = session.ask('Persona name (e.g., "Manager Mike"): ')
    persona_age = session.ask("Age range: ")
    persona_needs = session.ask("Main needs: ")
    persona_pain_points = session.ask("Current pain points: ")

    session.section("✨ Core Features")
    session.info(f"List {MAX_FEATURES} core features (press enter after each):")
    features = session.ask_features(MAX_FEATURES)

    session.section("🛠️ Technical Requirements")
    database = session.ask_choice(DatabaseChoice, "Choose your database:")
    session.console.print()
    auth = session.ask_choice(AuthChoice, "Choose authentication method:")

    session.section("📅 Timeline")
    timeline = session.ask('Estimated development time (e.g., "8 weeks"): ')
    mvp_date = session.ask("Target MVP launch date: ")

    session.section("📊 Success Metrics")
    user_target = session.ask("Target number of users in first 3 months: ")
    revenue_target = session.ask("Revenue target (if applicable): ")

    answers = Answers(
        app_name=app_name,
        problem=problem,
        target_users=target_users,
        unique_value=unique_value,
        persona_name=persona_name,
        persona_age=persona_age,
        persona_needs=persona_needs,
        persona_pain_points=persona_pain_points,
        features=features,
        database=database,
        auth=auth,
        timeline=timeline,
        mvp_date=mvp_date,
        user_target=user_target,
        revenue_target=revenue_target,
    )
    logger.info(f"Collected answers for {app_name!r}: {len(features)} features, "
                f"database={database.label}, auth={auth.label}")
    return answers
