"""
pubnode — configuration bootstrap for a pub/sub server node.
"""

__version__ = "0.1.0"
