"""Lecture Attendance package.

Organized by feature modules (courses, sessions, tokens, attendance, ...)
with a thin Flask controller layer over service/repository layers.
"""
