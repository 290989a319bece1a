"""
Application constants
"""
SERVICE_NAME = "it-asset-inventory"
DEFAULT_VERSION = "1.0.0"
