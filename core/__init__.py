# Core package - foundational components
#
# Modules:
# - config: Application settings
# - logging: Structured logging
# - secrets: Secrets manager
# - cache: Redis-backed cache with TTL
# - telemetry: OpenTelemetry tracing
# - storage: Database access and ORM models
# - container: Composition root
