"""
Summary: Reader framework, shape readers and the response decoder.
Why: Group everything that turns decoded payload trees into entities.
"""
