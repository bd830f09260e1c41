"""
Werwolf: roster configuration and private role reveal for a shared device.
"""

__version__ = "0.1.0"
