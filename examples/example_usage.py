"""Ejemplo: usar la capa de servicios sin pasar por Flask.

Los controladores son una capa fina; toda la lógica vive en los servicios.
"""

from src.salon_manager.salon_manager.container import build_container, build_storage


def main():
    storage = build_storage("memory")
    container = build_container(storage=storage)

    summary = container.dashboard_service.summary()
    print("Citas de hoy:", len(summary.today_appointments))
    print("Balance del mes:", summary.month.net)
    print("Stock bajo:", [item.name for item in summary.low_stock])

    for item in summary.low_stock:
        container.inventory_service.adjust_quantity(item.id, 10)
    print("Colecciones guardadas:", storage.keys())


if __name__ == "__main__":
    main()
