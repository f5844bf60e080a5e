"""Employee Onboarding package.

This package is organized by feature modules (employees, admins, auth, storage)
with a thin Flask controller layer over service/repository layers.
"""
