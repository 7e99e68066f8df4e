"""Version information for Folio."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the document or submission log layout
# MINOR: New sections or operations, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Declarative section normalization
#         - Per-section validation expressed as SectionSpec declarations
#         - Submission log patches validate the status lifecycle
#         - Operator CLI (show, update-section, replace-section, submissions)
# 0.1.0 - Initial release
#         - Atomic JSON document store with per-file write queue
#         - Bounded submission log
