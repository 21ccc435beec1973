"""
Application layer: use cases orchestrating the job lifecycle and plumber
profile, the dashboard aggregator and the repository/storage ports they
depend on.
"""
