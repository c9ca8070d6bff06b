"""Strand Attendance package.

This package is organized by feature modules (timeparse, schedules, attendance,
reports, students) around a pure attendance-status engine, with a thin Flask
controller layer and service/repository layers on top.
"""
