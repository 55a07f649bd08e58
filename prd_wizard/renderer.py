"""
PRD document renderer.

Substitutes collected answers into the fixed Product Requirements Document
layout. Answers are inserted verbatim; markdown characters in them are not
escaped.
"""

import locale
import logging
from datetime import date
from typing import List, Optional

from .answers import Answers


logger = logging.getLogger(__name__)


DOCUMENT_VERSION = "1.0"
DOCUMENT_STATUS = "Draft"
STORY_LIMIT = 3


def use_host_locale() -> None:
    """Apply the host's LC_TIME setting so dates follow the local format."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply host locale, using default date format: {e}")


def format_date(day: date) -> str:
    """
    Format a date the way the host locale writes it.

    Without a configured locale (C/POSIX) the US month/day/year form with a
    four-digit year is used, e.g. 10/16/2026.
    """
    if locale.setlocale(locale.LC_TIME) in ("C", "POSIX"):
        return f"{day.month}/{day.day}/{day.year}"
    return day.strftime("%x")


def feature_list(features: List[str]) -> List[str]:
    """Numbered, bold feature lines starting at 1."""
    return [f"{i}. **{feature}**" for i, feature in enumerate(features, start=1)]


def user_stories(features: List[str]) -> List[str]:
    """User stories for the first few features."""
    return [
        f"- As a user, I want to {feature.lower()} so that I can achieve my goals more efficiently"
        for feature in features[:STORY_LIMIT]
    ]


def phase_two_tasks(features: List[str]) -> List[str]:
    """Implementation checklist for the core-features phase."""
    return [f"- [ ] Implement {feature}" for feature in features[:STORY_LIMIT]]


def render_prd(answers: Answers, today: Optional[date] = None) -> str:
    """
    Render the PRD markdown for a set of answers.

    Args:
        answers: Collected wizard answers
        today: Date stamped into the footer (default: current local date)

    Returns:
        Complete markdown document
    """
    stamp = format_date(today or date.today())

    md = []
    md.append("# Product Requirements Document")
    md.append("")

    # Overview
    md.append("## Product Overview")
    md.append("")
    md.append(f"**Name**: {answers.app_name}")
    md.append(f"**Problem Statement**: {answers.problem}")
    md.append(f"**Target Users**: {answers.target_users}")
    md.append(f"**Unique Value Proposition**: {answers.unique_value}")
    md.append("")

    # Persona
    md.append("## User Personas")
    md.append("")
    md.append("### Primary Persona")
    md.append(f"**Name**: {answers.persona_name}")
    md.append(f"**Age Range**: {answers.persona_age}")
    md.append(f"**Needs**: {answers.persona_needs}")
    md.append(f"**Pain Points**: {answers.persona_pain_points}")
    md.append("")

    md.append("## Core Features (MVP)")
    md.append("")
    md.extend(feature_list(answers.features))
    md.append("")

    md.append("## User Stories")
    md.append("")
    md.extend(user_stories(answers.features))
    md.append("")

    # Technical requirements
    md.append("## Technical Requirements")
    md.append("")
    md.append("### Frontend")
    md.append("- **Framework**: Next.js 14 with TypeScript")
    md.append("- **Styling**: Tailwind CSS")
    md.append("- **State Management**: Context API / Zustand")
    md.append("- **UI Components**: Shadcn/ui or custom components")
    md.append("")
    md.append("### Backend")
    md.append(f"- **Database**: {answers.database.label}")
    md.append(f"- **Authentication**: {answers.auth.label}")
    md.append("- **API**: Next.js API routes")
    md.append("- **File Storage**: Vercel Blob / AWS S3")
    md.append("")
    md.append("### Infrastructure")
    md.append("- **Hosting**: Vercel")
    md.append("- **CI/CD**: GitHub Actions")
    md.append("- **Monitoring**: Vercel Analytics")
    md.append("- **Error Tracking**: Sentry")
    md.append("")

    md.append("## Data Model")
    md.append("")
    md.append("```")
    md.append("User")
    md.append("├── id: string (uuid)")
    md.append("├── email: string")
    md.append("├── name: string")
    md.append("├── role: enum (admin, user)")
    md.append("├── createdAt: DateTime")
    md.append("└── updatedAt: DateTime")
    md.append("")
    md.append("// Add more models based on your features")
    md.append("```")
    md.append("")

    md.append("## UI/UX Requirements")
    md.append("")
    md.append("### Design Principles")
    md.append("- Mobile-first responsive design")
    md.append("- Accessibility (WCAG 2.1 AA compliance)")
    md.append("- Fast load times (< 3s)")
    md.append("- Intuitive navigation")
    md.append("")
    md.append("### Key Pages")
    md.append("1. **Landing Page** - Product overview and CTA")
    md.append("2. **Dashboard** - User's main workspace")
    md.append("3. **Settings** - Account and preference management")
    md.append("4. **Admin Panel** - System management (if applicable)")
    md.append("")

    # Metrics
    md.append("## Success Metrics")
    md.append("")
    md.append("### User Metrics")
    md.append(f"- **Target Users**: {answers.user_target} active users in 3 months")
    md.append("- **Engagement**: 50% daily active users")
    md.append("- **Retention**: 80% monthly retention rate")
    md.append("")
    md.append("### Business Metrics")
    md.append(f"- **Revenue Target**: {answers.revenue_target or 'N/A'}")
    md.append("- **Customer Acquisition Cost**: < $50")
    md.append("- **Lifetime Value**: > $500")
    md.append("")
    md.append("### Technical Metrics")
    md.append("- **Performance**: 90+ Lighthouse score")
    md.append("- **Uptime**: 99.9% availability")
    md.append("- **Response Time**: < 200ms API response")
    md.append("")

    # Timeline
    md.append("## Timeline and Milestones")
    md.append("")
    md.append(f"**Total Duration**: {answers.timeline}")
    md.append(f"**MVP Launch**: {answers.mvp_date}")
    md.append("")
    md.append("### Phase 1: Foundation (Week 1-2)")
    md.append("- [ ] Project setup and configuration")
    md.append("- [ ] Database schema design")
    md.append("- [ ] Authentication implementation")
    md.append("- [ ] Basic UI components")
    md.append("")
    md.append("### Phase 2: Core Features (Week 3-5)")
    md.extend(phase_two_tasks(answers.features))
    md.append("")
    md.append("### Phase 3: Polish & Testing (Week 6-7)")
    md.append("- [ ] UI/UX improvements")
    md.append("- [ ] Performance optimization")
    md.append("- [ ] Testing and bug fixes")
    md.append("- [ ] Documentation")
    md.append("")
    md.append("### Phase 4: Launch (Week 8)")
    md.append("- [ ] Production deployment")
    md.append("- [ ] Monitoring setup")
    md.append("- [ ] User onboarding")
    md.append("- [ ] Launch marketing")
    md.append("")

    md.append("## Risks and Mitigations")
    md.append("")
    md.append("### Technical Risks")
    md.append("- **Risk**: Scalability issues with user growth")
    md.append("  - **Mitigation**: Implement caching, optimize database queries, use CDN")
    md.append("")
    md.append("- **Risk**: Security vulnerabilities")
    md.append("  - **Mitigation**: Regular security audits, implement best practices, use security tools")
    md.append("")
    md.append("### Business Risks")
    md.append("- **Risk**: Low user adoption")
    md.append("  - **Mitigation**: User research, beta testing, iterative improvements")
    md.append("")
    md.append("- **Risk**: Competition")
    md.append("  - **Mitigation**: Focus on unique value proposition, rapid iteration")
    md.append("")

    md.append("## Assumptions")
    md.append("")
    md.append("- Users have stable internet connections")
    md.append("- Target users are comfortable with web applications")
    md.append("- Market demand exists for this solution")
    md.append("- Technical stack can handle expected load")
    md.append("")

    md.append("## Dependencies")
    md.append("")
    md.append("- Third-party APIs are reliable and available")
    md.append("- Payment processing (if applicable) is compliant")
    md.append("- Data privacy regulations are followed (GDPR, CCPA)")
    md.append("")

    md.append("## Next Steps")
    md.append("")
    md.append("1. **Review and approve this PRD**")
    md.append("2. **Set up development environment**")
    md.append("3. **Create detailed technical design document**")
    md.append("4. **Begin development sprint planning**")
    md.append("5. **Start implementation**")
    md.append("")

    # Footer
    md.append("---")
    md.append("")
    md.append(f"**Document Version**: {DOCUMENT_VERSION}")
    md.append(f"**Created Date**: {stamp}")
    md.append(f"**Last Updated**: {stamp}")
    md.append(f"**Status**: {DOCUMENT_STATUS}")
    md.append("")
    md.append("## Approval")
    md.append("")
    md.append("- [ ] Product Owner")
    md.append("- [ ] Technical Lead")
    md.append("- [ ] Design Lead")
    md.append("- [ ] Stakeholders")
    md.append("")

    return "\n".join(md)
