"""Family Income package.

Tracks monthly attendance for two people and derives their salary and
leave balances. Organized by feature modules (state, payroll, backup)
with a thin Flask controller layer over service/repository layers.
"""
