"""Employee CSV package.

Reads a semicolon-separated staff file into immutable Person records and
summarizes them. Organized by feature modules (people, departments,
statistics, ...) with a thin CLI on top.
"""
