"""Vector and quaternion math, transforms, bounding boxes, input state, string and list helpers, interned names and allocation tracking for a small game engine."""

__version__ = "0.1.0"