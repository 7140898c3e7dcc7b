"""
Known answer options for the onboarding questionnaire.

The backend defines the accepted values; these are the ones offered by the
questionnaire today and are used for display only. Unknown values are never
rejected by this package.
"""

PRIMARY_GOALS = {
    "build_habits": "Build better habits",
    "achieve_goals": "Achieve specific goals",
    "get_organized": "Get more organized",
    "stay_accountable": "Stay accountable",
    "level_up": "Level up my life",
}

BIGGEST_CHALLENGES = {
    "lack_clarity": "Lack of clarity",
    "time_management": "Poor time management",
    "no_motivation": "No motivation",
    "no_accountability": "No accountability",
    "cant_track": "Can't track progress",
}

WORK_STYLES = {
    "solo": "Solo grinder",
    "team": "Team player",
    "planner": "Planner",
    "flexible": "Flexible",
    "streak_lover": "Streak lover",
}

FOCUS_AREAS = {
    "career": "Career & Work",
    "health": "Health & Fitness",
    "learning": "Learning & Skills",
    "finance": "Finance & Business",
    "personal": "Personal Growth",
    "creative": "Creative Projects",
}


def label_for(options: dict, value: str) -> str:
    """Return the display label for a value, or the value itself if unknown."""
    return options.get(value, value)
