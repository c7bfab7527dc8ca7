"""
Scout Pipeline Analytics

Deal pipeline metrics and forecasting for Scout, the sponsorship CRM
for social-media creators.
"""

__version__ = "0.1.0"
