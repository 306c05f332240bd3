"""
PointsDesk - Loyalty Points Desk Client
"""
__version__ = "1.0.0"
