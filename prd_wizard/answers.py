"""
Collected operator answers for a single wizard run.
"""

from dataclasses import dataclass, field
from typing import List

from .choices import AuthChoice, DatabaseChoice


MAX_FEATURES = 5


@dataclass
class Answers:
    """
    Answers gathered by the wizard.

    Every text field holds exactly what the operator typed, or an empty
    string when the prompt was left blank.

    Attributes:
        app_name: Application name (also used for the output file name)
        problem: One-sentence problem statement
        target_users: Target users
        unique_value: Unique value proposition
        persona_name: Primary persona name
        persona_age: Primary persona age range
        persona_needs: Primary persona needs
        persona_pain_points: Primary persona pain points
        features: Non-empty feature descriptions in submitted order (0-5)
        database: Storage technology selection
        auth: Identity verification selection
        timeline: Estimated development time
        mvp_date: Target MVP launch date
        user_target: Target users in the first 3 months
        revenue_target: Revenue target, empty if not applicable
    """
    # Basic information
    app_name: str = ""
    problem: str = ""
    target_users: str = ""
    unique_value: str = ""

    # Primary persona
    persona_name: str = ""
    persona_age: str = ""
    persona_needs: str = ""
    persona_pain_points: str = ""

    # Features
    features: List[str] = field(default_factory=list)

    # Technical choices
    database: DatabaseChoice = field(default_factory=DatabaseChoice.default)
    auth: AuthChoice = field(default_factory=AuthChoice.default)

    # Timeline
    timeline: str = ""
    mvp_date: str = ""

    # Success metrics
    user_target: str = ""
    revenue_target: str = ""

    def __post_init__(self):
        self.features = [f for f in self.features if f][:MAX_FEATURES]
