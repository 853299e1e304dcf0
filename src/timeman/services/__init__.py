"""Service layer: date arithmetic, duration encoding, and help lookups.

Services translate CLI-level requests into domain calls and wrap every
outcome in a :class:`~timeman.services.result.ServiceResult`.
"""
