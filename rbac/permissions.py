# UniResearch - Permission identifiers (<resource>:<action>, compared as plain strings)

# --- User management ---
USER_CREATE = "user:create"
USER_READ = "user:read"
USER_UPDATE = "user:update"
USER_DELETE = "user:delete"
USER_MANAGE_ROLES = "user:manage_roles"

# --- Faculty management ---
FACULTY_CREATE = "faculty:create"
FACULTY_READ = "faculty:read"
FACULTY_UPDATE = "faculty:update"
FACULTY_DELETE = "faculty:delete"
FACULTY_APPROVE = "faculty:approve"

# --- Publications ---
PUBLICATION_CREATE = "publication:create"
PUBLICATION_READ = "publication:read"
PUBLICATION_UPDATE = "publication:update"
PUBLICATION_DELETE = "publication:delete"
PUBLICATION_APPROVE = "publication:approve"
PUBLICATION_REVIEW = "publication:review"

# --- Funded projects ---
PROJECT_CREATE = "project:create"
PROJECT_READ = "project:read"
PROJECT_UPDATE = "project:update"
PROJECT_DELETE = "project:delete"
PROJECT_APPROVE = "project:approve"
PROJECT_REVIEW = "project:review"

# --- Final year projects ---
FYP_CREATE = "fyp:create"
FYP_READ = "fyp:read"
FYP_UPDATE = "fyp:update"
FYP_DELETE = "fyp:delete"
FYP_APPROVE = "fyp:approve"
FYP_REVIEW = "fyp:review"

# --- Thesis supervision ---
THESIS_CREATE = "thesis:create"
THESIS_READ = "thesis:read"
THESIS_UPDATE = "thesis:update"
THESIS_DELETE = "thesis:delete"
THESIS_APPROVE = "thesis:approve"
THESIS_REVIEW = "thesis:review"

# --- Events ---
EVENT_CREATE = "event:create"
EVENT_READ = "event:read"
EVENT_UPDATE = "event:update"
EVENT_DELETE = "event:delete"
EVENT_APPROVE = "event:approve"
EVENT_REVIEW = "event:review"

# --- Travel grants ---
TRAVEL_CREATE = "travel:create"
TRAVEL_READ = "travel:read"
TRAVEL_UPDATE = "travel:update"
TRAVEL_DELETE = "travel:delete"
TRAVEL_APPROVE = "travel:approve"
TRAVEL_REVIEW = "travel:review"

# --- Reports and analytics ---
REPORTS_VIEW = "reports:view"
ANALYTICS_VIEW = "analytics:view"
DASHBOARD_VIEW = "dashboard:view"

# --- System administration ---
SYSTEM_ADMIN = "system:admin"
SYSTEM_CONFIG = "system:config"
SYSTEM_BACKUP = "system:backup"

# Research resources share the same six actions
RESEARCH_RESOURCES: tuple[str, ...] = ("publication", "project", "fyp", "thesis", "event", "travel")


def research(action: str) -> list[str]:
    """`<resource>:<action>` for every research resource, e.g. research("approve")."""
    return [f"{resource}:{action}" for resource in RESEARCH_RESOURCES]


ALL_PERMISSIONS: frozenset[str] = frozenset(
    [
        USER_CREATE, USER_READ, USER_UPDATE, USER_DELETE, USER_MANAGE_ROLES,
        FACULTY_CREATE, FACULTY_READ, FACULTY_UPDATE, FACULTY_DELETE, FACULTY_APPROVE,
        PUBLICATION_CREATE, PUBLICATION_READ, PUBLICATION_UPDATE,
        PUBLICATION_DELETE, PUBLICATION_APPROVE, PUBLICATION_REVIEW,
        PROJECT_CREATE, PROJECT_READ, PROJECT_UPDATE,
        PROJECT_DELETE, PROJECT_APPROVE, PROJECT_REVIEW,
        FYP_CREATE, FYP_READ, FYP_UPDATE, FYP_DELETE, FYP_APPROVE, FYP_REVIEW,
        THESIS_CREATE, THESIS_READ, THESIS_UPDATE,
        THESIS_DELETE, THESIS_APPROVE, THESIS_REVIEW,
        EVENT_CREATE, EVENT_READ, EVENT_UPDATE, EVENT_DELETE, EVENT_APPROVE, EVENT_REVIEW,
        TRAVEL_CREATE, TRAVEL_READ, TRAVEL_UPDATE,
        TRAVEL_DELETE, TRAVEL_APPROVE, TRAVEL_REVIEW,
        REPORTS_VIEW, ANALYTICS_VIEW, DASHBOARD_VIEW,
        SYSTEM_ADMIN, SYSTEM_CONFIG, SYSTEM_BACKUP,
    ]
)
