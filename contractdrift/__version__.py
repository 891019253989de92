"""Version information for contractdrift."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the report contract
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - HAR aggregation and HTTP upload endpoint
#         - Traffic documents with log.entries are aggregated on intake
#         - /api/web/drift/upload accepts multipart files with per-file failures
#         - Optional PyYAML parsing for specification files
# 0.1.0 - Initial release
#         - Drift engine (registry, correlator, mismatches, breaking risks, field usage)
#         - Markup subset parser for specification files
#         - CLI report with rich tables
