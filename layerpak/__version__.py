"""Version information for layerpak."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the contributor API or metadata layout
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.3.0 - Layer store and inspection CLI
#         - LayerStore persists layer records as YAML next to the layer directory
#         - `layerpak inspect`, `layerpak dependencies` and `layerpak check` commands
#         - LayerContributor.is_cached() for side-effect free cache checks
# 0.2.0 - Buildpack descriptor loading
#         - buildpack.toml parsed into BuildpackInfo / BuildpackDependency DTOs
#         - ConfigService with YAML and environment overrides
# 0.1.0 - Initial release
#         - LayerContributor with metadata based cache avoidance
#         - Dependency and helper layer contributors with build plan recording
