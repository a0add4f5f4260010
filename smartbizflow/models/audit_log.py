"""
Audit log model
"""
COLLECTION = "auditLogs"

# Append-only: records carry id and createdAt but never updatedAt.
# oldValues / newValues are opaque strings (JSON text written by the audit service).
FIELDS = (
    "userId",
    "action",  # e.g., "CREATE", "UPDATE", "DELETE", "LOGIN"
    "table",  # collection name of the affected record
    "recordId",
    "oldValues",
    "newValues",
    "ipAddress",
    "userAgent",
)
SEARCH_FIELDS = ("action", "table")
