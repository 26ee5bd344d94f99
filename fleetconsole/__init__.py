"""
Fleet console: client-side contract layer for the fleet management API.

Subpackages:
- shared: Settings, exceptions, models, session persistence
- modules: HTTP client, resource clients, auth store, request helpers,
  roles, data sources, export and validation
"""

__version__ = "0.1.0"
