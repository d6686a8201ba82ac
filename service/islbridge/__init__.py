"""
islbridge - voice to Indian Sign Language interpreter service.
"""

__version__ = '1.0.0'
