"""Attendance Tracker package.

Organized by feature modules (users, attendance, timetables, reports) with a
thin Flask controller layer over service/repository layers.
"""
