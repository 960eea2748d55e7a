"""
Summary: Format adapters feeding the object readers.
Why: Isolate XML layout differences from the shape readers.
"""
