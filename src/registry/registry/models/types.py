# ABOUTME: Shared type aliases used across the settings registry
# ABOUTME: Names the structured configuration mapping written to the artifact store

from typing import Any, Dict, TypeAlias

# Structured configuration mapping persisted by artifact stores
ConfigData: TypeAlias = Dict[str, Any]
