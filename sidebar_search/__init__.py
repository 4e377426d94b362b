# Sidebar Search Package
"""
Incremental search panel for a messaging client's sidebar.

Components:
  - Search (search/): chat + contact lookups merged into one result list
  - Services (services/): remote and local directory interfaces
  - Panels (panels/): the surface the view layer talks to
"""

__version__ = "0.1.0-dev"
