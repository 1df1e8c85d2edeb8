"""
Profile store application package.

Persists digital business-card profiles in MongoDB and serves them by slug.
"""
