"""QR attendance package.

Organised by feature modules (students, instructors, sessions, attendance,
reports) with a thin Flask controller layer over service/repository layers.
The record store is MySQL or in-process memory, chosen at startup.
"""
