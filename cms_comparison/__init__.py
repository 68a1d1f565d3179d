"""Headless CMS comparison data service.

Fetches the CMS comparison data set, validates it against the closed
license/category vocabulary and builds the initial application state.
"""

__version__ = "0.1.0"
