"""
floki - run cargo across the app and client projects of a repository.
"""
