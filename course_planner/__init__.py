"""Course catalog loading, validation and lookup"""

__version__ = '1.0.0'
