"""
Infrastructure layer: mappers, repositories and the web surface.
"""
