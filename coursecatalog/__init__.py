"""
Course catalog: load course records into an ordered index and query them.
"""
