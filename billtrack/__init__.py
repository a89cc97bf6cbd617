"""
Billing and project tracker for freelancers and agencies.
"""

__version__ = "1.0.0"
