"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import CollectionName

STORAGE_KEYS = {
    CollectionName.CLIENTS: "salonClients",
    CollectionName.APPOINTMENTS: "salonAppointments",
    CollectionName.SERVICES: "salonServices",
    CollectionName.TRANSACTIONS: "salonTransactions",
    CollectionName.INVENTORY: "salonInventory",
    CollectionName.NOTIFICATIONS: "salonNotifications",
}

ACTIVE_CLIENT_DAYS = 30
TOP_CLIENTS_LIMIT = 5
TREND_MONTHS = 6

INCOME_CATEGORIES = ("Servicios", "Productos", "Otros ingresos")
EXPENSE_CATEGORIES = ("Inventario", "Servicios", "Renta", "Gastos", "Nómina", "Otros")

# Abreviaturas de mes usadas en las gráficas de tendencia.
MONTH_ABBREVIATIONS = ("ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sep", "oct", "nov", "dic")
