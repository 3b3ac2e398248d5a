"""Built-in demo dataset used when a collection has never been stored.

Datos de demostración: a first run shows a populated salon rather than empty screens.
"""

from __future__ import annotations

from datetime import date, datetime

from ..appointments.model import Appointment
from ..catalog.model import Service
from ..clients.model import Client, ServiceHistory
from ..core.enums import AppointmentStatus, CollectionName, NotificationType, TransactionType
from ..finances.model import Transaction
from ..inventory.model import InventoryItem
from ..notifications.model import Notification


def seed_clients() -> list[Client]:
    return [
        Client(
            id="1",
            name="María González",
            phone="+52 555-0101",
            email="maria.g@email.com",
            notes="Prefiere productos sin amoniaco",
            birthday=date(1985, 3, 15),
            last_visit=date(2026, 1, 15),
            total_visits=24,
            total_spent=12500,
            preferences=["Tinte sin amoniaco", "Corte en capas", "Productos orgánicos"],
            history=[
                ServiceHistory(
                    id="h1",
                    date=date(2026, 1, 15),
                    services=["Corte", "Tinte", "Tratamiento"],
                    total=850,
                    notes="Cliente muy satisfecha con el resultado",
                    photos=[],
                ),
                ServiceHistory(
                    id="h2",
                    date=date(2025, 12, 20),
                    services=["Alaciado", "Hidratación"],
                    total=950,
                    notes="Aplicar keratina suave",
                    photos=[],
                ),
            ],
        ),
        Client(
            id="2",
            name="Ana Martínez",
            phone="+52 555-0102",
            email="ana.m@email.com",
            notes="Cuero cabelludo sensible",
            birthday=date(1990, 7, 22),
            last_visit=date(2026, 1, 18),
            total_visits=18,
            total_spent=9800,
            preferences=["Productos hipoalergénicos", "Peinados recogidos"],
            history=[
                ServiceHistory(
                    id="h3",
                    date=date(2026, 1, 18),
                    services=["Manicure", "Pedicure"],
                    total=450,
                    notes="Le encantó el color nude",
                    photos=[],
                ),
            ],
        ),
        Client(
            id="3",
            name="Laura Ramírez",
            phone="+52 555-0103",
            email="laura.r@email.com",
            notes="Prefiere citas por la tarde",
            birthday=date(1988, 11, 30),
            last_visit=date(2026, 1, 12),
            total_visits=32,
            total_spent=18900,
            preferences=["Balayage", "Tratamientos capilares", "Maquillaje de noche"],
            history=[
                ServiceHistory(
                    id="h4",
                    date=date(2026, 1, 12),
                    services=["Balayage", "Corte", "Peinado"],
                    total=1200,
                    notes="Resultado espectacular, cliente fiel",
                    photos=[],
                ),
            ],
        ),
        Client(
            id="4",
            name="Carmen Silva",
            phone="+52 555-0104",
            notes="Cliente VIP",
            birthday=date(1982, 5, 10),
            last_visit=date(2026, 1, 19),
            total_visits=45,
            total_spent=28500,
            preferences=["Mechas californianas", "Tratamientos premium", "Faciales"],
            history=[
                ServiceHistory(
                    id="h5",
                    date=date(2026, 1, 19),
                    services=["Facial", "Depilación"],
                    total=750,
                    notes="Siempre puntual",
                    photos=[],
                ),
            ],
        ),
        Client(
            id="5",
            name="Patricia López",
            phone="+52 555-0105",
            email="paty.l@email.com",
            notes="Le gusta probar nuevos estilos",
            birthday=date(1995, 9, 18),
            last_visit=date(2026, 1, 10),
            total_visits=15,
            total_spent=7200,
            preferences=["Cortes modernos", "Colores vibrantes"],
            history=[
                ServiceHistory(
                    id="h6",
                    date=date(2026, 1, 10),
                    services=["Corte pixie", "Color fantasía"],
                    total=980,
                    notes="Color rosa pastel, le encantó",
                    photos=[],
                ),
            ],
        ),
    ]


def seed_appointments() -> list[Appointment]:
    confirmed = AppointmentStatus.CONFIRMED
    pending = AppointmentStatus.PENDING
    return [
        Appointment("a1", "1", "María González", date(2026, 1, 20), "10:00", ["Corte", "Tinte"], 120, confirmed, "Retoque de raíz", True),
        Appointment("a2", "2", "Ana Martínez", date(2026, 1, 20), "14:00", ["Manicure", "Pedicure"], 90, confirmed, "", True),
        Appointment("a3", "3", "Laura Ramírez", date(2026, 1, 21), "11:00", ["Balayage", "Tratamiento"], 180, confirmed, "Tonos caramelo", True),
        Appointment("a4", "4", "Carmen Silva", date(2026, 1, 21), "16:00", ["Facial", "Maquillaje"], 120, pending, "Evento especial", False),
        Appointment("a5", "5", "Patricia López", date(2026, 1, 22), "09:00", ["Corte", "Peinado"], 90, confirmed, "", True),
        Appointment("a6", "1", "María González", date(2026, 1, 23), "15:00", ["Hidratación profunda"], 60, pending, "", False),
    ]


def seed_services() -> list[Service]:
    rows = [
        ("s1", "Corte Dama", "Corte", 250, 45, "Corte de cabello con técnica personalizada"),
        ("s2", "Corte Caballero", "Corte", 180, 30, "Corte de cabello masculino"),
        ("s3", "Tinte Completo", "Color", 450, 120, "Aplicación de color en todo el cabello"),
        ("s4", "Retoque de Raíz", "Color", 320, 90, "Aplicación de color solo en raíz"),
        ("s5", "Balayage", "Color", 850, 180, "Técnica de mechas naturales"),
        ("s6", "Mechas Californianas", "Color", 750, 150, "Mechas con efecto degradado"),
        ("s7", "Alaciado", "Tratamiento", 600, 180, "Tratamiento de alaciado permanente"),
        ("s8", "Hidratación Profunda", "Tratamiento", 350, 60, "Tratamiento intensivo de hidratación"),
        ("s9", "Keratina", "Tratamiento", 900, 180, "Tratamiento con keratina para alisar"),
        ("s10", "Manicure", "Uñas", 200, 45, "Manicure completo con esmaltado"),
        ("s11", "Pedicure", "Uñas", 250, 60, "Pedicure completo con esmaltado"),
        ("s12", "Uñas Acrílicas", "Uñas", 450, 120, "Aplicación de uñas acrílicas"),
        ("s13", "Peinado Casual", "Peinado", 280, 45, "Peinado para uso diario"),
        ("s14", "Peinado de Novia", "Peinado", 800, 120, "Peinado elaborado para eventos"),
        ("s15", "Maquillaje Social", "Maquillaje", 350, 60, "Maquillaje para eventos"),
        ("s16", "Maquillaje de Novia", "Maquillaje", 650, 90, "Maquillaje profesional para bodas"),
        ("s17", "Facial Básico", "Facial", 400, 60, "Limpieza facial profunda"),
        ("s18", "Depilación Ceja", "Depilación", 80, 15, "Depilación y diseño de cejas"),
        ("s19", "Depilación Facial", "Depilación", 180, 30, "Depilación completa de rostro"),
        ("s20", "Permanente", "Tratamiento", 550, 150, "Permanente rizado o ondulado"),
    ]
    return [
        Service(id=sid, name=name, category=category, price=price, duration=duration, description=desc, is_active=True)
        for sid, name, category, price, duration, desc in rows
    ]


def seed_transactions() -> list[Transaction]:
    income = TransactionType.INCOME
    expense = TransactionType.EXPENSE
    return [
        Transaction("t1", date(2026, 1, 19), income, 750, "Servicios", "Facial + Depilación - Carmen Silva", client_id="4"),
        Transaction("t2", date(2026, 1, 18), income, 450, "Servicios", "Manicure + Pedicure - Ana Martínez", client_id="2"),
        Transaction("t3", date(2026, 1, 18), expense, 1200, "Inventario", "Compra de tintes y productos"),
        Transaction("t4", date(2026, 1, 17), income, 980, "Servicios", "Corte + Color - Nueva cliente"),
        Transaction("t5", date(2026, 1, 16), expense, 450, "Servicios", "Pago de luz"),
        Transaction("t6", date(2026, 1, 15), income, 850, "Servicios", "Corte + Tinte + Tratamiento - María González", client_id="1"),
        Transaction("t7", date(2026, 1, 15), income, 600, "Servicios", "Alaciado - Nueva cliente"),
        Transaction("t8", date(2026, 1, 14), expense, 800, "Inventario", "Productos de uñas y esmaltes"),
        Transaction("t9", date(2026, 1, 14), income, 1200, "Servicios", "Balayage + Corte + Peinado - Laura Ramírez", client_id="3"),
        Transaction("t10", date(2026, 1, 13), income, 550, "Servicios", "Permanente - Cliente regular"),
        Transaction("t11", date(2026, 1, 13), income, 350, "Servicios", "Maquillaje social - Evento"),
        Transaction("t12", date(2026, 1, 12), expense, 250, "Gastos", "Internet y teléfono"),
    ]


def seed_inventory() -> list[InventoryItem]:
    rows = [
        ("i1", "Tinte Rubio Ceniza", "Tintes", 8, "unidades", 5, 120, date(2026, 1, 18)),
        ("i2", "Tinte Castaño Oscuro", "Tintes", 12, "unidades", 5, 120, date(2026, 1, 18)),
        ("i3", "Oxidante 20vol", "Tintes", 15, "litros", 10, 85, date(2026, 1, 18)),
        ("i4", "Shampoo Hidratante", "Productos", 6, "unidades", 8, 180, date(2026, 1, 10)),
        ("i5", "Acondicionador Reparador", "Productos", 4, "unidades", 8, 180, date(2026, 1, 10)),
        ("i6", "Keratina Brasileña", "Tratamientos", 3, "unidades", 2, 450, date(2025, 12, 28)),
        ("i7", "Mascarilla Hidratante", "Tratamientos", 10, "unidades", 5, 200, date(2026, 1, 15)),
        ("i8", "Esmalte Permanente - Nude", "Uñas", 15, "unidades", 10, 95, date(2026, 1, 14)),
        ("i9", "Esmalte Permanente - Rojo", "Uñas", 12, "unidades", 10, 95, date(2026, 1, 14)),
        ("i10", "Base coat", "Uñas", 7, "unidades", 5, 110, date(2026, 1, 14)),
        ("i11", "Top coat", "Uñas", 8, "unidades", 5, 110, date(2026, 1, 14)),
        ("i12", "Guantes desechables", "Consumibles", 3, "cajas", 2, 85, date(2026, 1, 5)),
        ("i13", "Toallas desechables", "Consumibles", 25, "paquetes", 15, 45, date(2026, 1, 12)),
        ("i14", "Capa de corte", "Herramientas", 8, "unidades", 6, 120, date(2025, 11, 20)),
    ]
    return [
        InventoryItem(
            id=iid,
            name=name,
            category=category,
            quantity=quantity,
            unit=unit,
            min_stock=min_stock,
            price=price,
            last_purchase=last_purchase,
        )
        for iid, name, category, quantity, unit, min_stock, price, last_purchase in rows
    ]


def seed_notifications() -> list[Notification]:
    return [
        Notification("n1", NotificationType.APPOINTMENT, "Cita próxima", "María González tiene cita mañana a las 10:00", datetime(2026, 1, 20, 8, 0), False),
        Notification("n2", NotificationType.LOW_STOCK, "Stock bajo", "Shampoo Hidratante por debajo del stock mínimo", datetime(2026, 1, 19, 14, 0), False),
        Notification("n3", NotificationType.LOW_STOCK, "Stock bajo", "Acondicionador Reparador por debajo del stock mínimo", datetime(2026, 1, 19, 14, 0), False),
        Notification("n4", NotificationType.BIRTHDAY, "Cumpleaños próximo", "Carmen Silva cumple años el 10 de Mayo", datetime(2026, 1, 19, 9, 0), True),
        Notification("n5", NotificationType.REMINDER, "Cliente inactiva", "Patricia López no ha visitado en 10 días", datetime(2026, 1, 18, 10, 0), True),
    ]


def seed_collections() -> dict[CollectionName, list]:
    """Fresh copies of every seed collection, keyed by collection."""
    return {
        CollectionName.CLIENTS: seed_clients(),
        CollectionName.APPOINTMENTS: seed_appointments(),
        CollectionName.SERVICES: seed_services(),
        CollectionName.TRANSACTIONS: seed_transactions(),
        CollectionName.INVENTORY: seed_inventory(),
        CollectionName.NOTIFICATIONS: seed_notifications(),
    }
