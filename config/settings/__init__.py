"""
Settings module for the Product Delete service
"""

from decouple import config

# Determine which settings to use
ENVIRONMENT = config("ENVIRONMENT", default="development")

if ENVIRONMENT == "production":
    from .production import *
elif ENVIRONMENT == "test":
    from .test import *
else:
    from .development import *
