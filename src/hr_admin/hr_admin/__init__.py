"""HR Admin package.

This package is organized by feature modules (employees, departments, payroll, ...)
on top of a generic CRUD layer: each feature declares an entity descriptor and a
MySQL repository, and the shared controller/service layers do the rest.
"""
