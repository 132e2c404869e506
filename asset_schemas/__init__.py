"""
Virtual-World Asset Metadata Schemas

Shared enumerations, JSON-schema fragments, typed models and runtime
validators for wearable, parcel and category metadata received from content
servers and on-chain registries.
"""

import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
