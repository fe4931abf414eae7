"""HRMS package.

Feature modules (employees, attendance, shifts, leaves, activity, dashboard)
each carry a model, a repository interface with its MySQL implementation,
a service holding the use cases and a thin Flask controller.
"""
