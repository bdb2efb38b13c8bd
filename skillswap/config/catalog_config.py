"""
Catalog Configuration
Static reference data shared by signup, the skills directory, meetup
scheduling and the earn-credits page.
Also consumed by the seed script to populate the skills table.
"""

COLLEGES = [
    "MIT",
    "Stanford University",
    "Harvard University",
    "UC Berkeley",
    "Carnegie Mellon",
    "Georgia Tech",
    "Caltech",
    "Princeton University",
    "University of Washington",
    "Cornell University",
]

SKILL_CATEGORIES = [
    "Programming",
    "Design",
    "Marketing",
    "Creative",
    "Communication",
    "Music",
    "Language",
    "Academic",
    "Life Skills",
    "Health",
]

# Category assigned to skills created on the fly from a free-text name
DEFAULT_SKILL_CATEGORY = "General"

# Sample skills and the category each one is seeded under
SAMPLE_SKILLS = {
    "JavaScript": "Programming",
    "Python": "Programming",
    "Graphic Design": "Design",
    "Photography": "Creative",
    "Public Speaking": "Communication",
    "Guitar": "Music",
    "Spanish": "Language",
    "Mathematics": "Academic",
    "Cooking": "Life Skills",
    "Fitness Training": "Health",
}

USER_ROLES = ["student", "instructor", "staff"]

# Proficiency recorded for a skill when the user does not give one
DEFAULT_PROFICIENCY = {
    "offered": 3,
    "wanted": 1,
}

# Meetup booking options
DURATION_OPTIONS = [30, 60, 90, 120]
CREDIT_OFFER_OPTIONS = [15, 20, 25, 30, 40, 50]
DEFAULT_DURATION_MINUTES = 60
DEFAULT_CREDIT_OFFER = 25

# Earning opportunities shown on the earn-credits page.
# "task_type" is set only for tasks that can be completed directly through the API.
EARN_OPPORTUNITIES = [
    {
        "id": "daily-login",
        "title": "Daily Login",
        "description": "Log in to the platform daily",
        "credits": 5,
        "action": "Complete",
        "task_type": "daily_login",
        "reward_description": "Daily login bonus",
        "available": True,
    },
    {
        "id": "teach-skill",
        "title": "Teach a Skill",
        "description": "Complete a teaching session",
        "credits": 30,
        "action": "Start Teaching",
        "href": "/skills/manage",
        "available": True,
    },
    {
        "id": "help-student",
        "title": "Help a Student",
        "description": "Answer questions or provide guidance",
        "credits": 15,
        "action": "Find Students",
        "href": "/community",
        "available": True,
    },
    {
        "id": "complete-profile",
        "title": "Complete Profile",
        "description": "Add bio and skills to your profile",
        "credits": 10,
        "action": "Update Profile",
        "href": "/profile",
        "available": True,
    },
    {
        "id": "refer-friend",
        "title": "Refer a Friend",
        "description": "Invite someone to join the platform",
        "credits": 25,
        "action": "Send Invite",
        "href": "/referral",
        "available": True,
    },
    {
        "id": "weekly-goal",
        "title": "Weekly Learning Goal",
        "description": "Complete 3 learning sessions this week",
        "credits": 50,
        "action": "View Progress",
        "href": "/goals",
        "available": False,
    },
]


def get_completable_tasks():
    """
    Returns the directly completable tasks keyed by task_type
    Format: {
        "daily_login": {"credits": 5, "description": "Daily login bonus", "opportunity_id": "daily-login"},
        ...
    }
    """
    tasks = {}
    for opportunity in EARN_OPPORTUNITIES:
        task_type = opportunity.get("task_type")
        if not task_type or not opportunity["available"]:
            continue
        tasks[task_type] = {
            "credits": opportunity["credits"],
            "description": opportunity.get("reward_description", opportunity["title"]),
            "opportunity_id": opportunity["id"],
        }
    return tasks


def get_skill_seed_rows():
    """Rows for the skills table built from SAMPLE_SKILLS"""
    return [
        {
            "name": name,
            "category": category,
            "description": f"{name} skill",
        }
        for name, category in SAMPLE_SKILLS.items()
    ]


COMPLETABLE_TASKS = get_completable_tasks()
