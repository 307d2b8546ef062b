"""Tutor Desk package.

Administrative tool for private tutors: classes, enrolment, per-day
attendance, invoices and payments. Organized by feature modules
(classes, students, attendance, invoices, ...) with a thin Flask controller
layer over service/repository layers.
"""
