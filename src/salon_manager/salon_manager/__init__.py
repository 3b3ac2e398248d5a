"""Salon Manager package.

Organized by feature modules (clients, appointments, catalog, finances,
inventory, notifications) on top of an explicit record store with
write-through persistence, plus a thin Flask JSON controller layer.
"""
