"""
초기 데이터 생성 — 매장 #1247 진열대 상품, 예측 문구 풀, 진행 중 배송
- 실행 시마다 동일한 초기 상태를 만든다 (리셋 시 재사용).
"""

from datetime import date

from stocktics.models import Delivery, DeliveryPriority, DeliveryStatus, Item, SensorType

# (이름, 선반, 현재 재고, 최대 용량, 센서, 마지막 갱신, 예측)
_SEED_PRODUCTS = [
    ("Coca Cola 12pk", "A3", 12, 48, SensorType.RFID, "2 min ago", "Stock out in 2 hours"),
    ("Wonder Bread", "B7", 8, 24, SensorType.CAMERA, "5 min ago", "Restock by 3 PM"),
    ("Tide Pods", "C2", 15, 20, SensorType.RFID, "1 min ago", "Monitor for weekend"),
    ("Parle-G Biscuits", "D1", 5, 30, SensorType.CAMERA, "3 min ago", "Popular item - urgent restock"),
    ("Amul Milk 1L", "E5", 6, 32, SensorType.RFID, "1 min ago", "Urgent restock needed"),
    ("Haldiram's Bhujia", "F8", 18, 24, SensorType.CAMERA, "4 min ago", "Restock tomorrow"),
    ("Britannia Marie Gold", "G1", 3, 16, SensorType.RFID, "1 min ago", "Stock out by noon"),
    ("Tata Tea Premium", "H4", 22, 30, SensorType.CAMERA, "2 min ago", "Weekly restock cycle"),
    ("Maggi 2-Minute Noodles", "I6", 7, 36, SensorType.RFID, "3 min ago", "High demand item"),
    ("Patanjali Honey", "J3", 14, 20, SensorType.CAMERA, "5 min ago", "Stable inventory"),
    ("Thums Up 600ml", "K2", 4, 42, SensorType.RFID, "1 min ago", "Critical - restock ASAP"),
    ("Dabur Chyawanprash", "L9", 11, 18, SensorType.CAMERA, "4 min ago", "Seasonal demand stable"),
    ("Mother Dairy Paneer", "M1", 8, 25, SensorType.RFID, "2 min ago", "Weekend demand spike"),
    ("Kurkure Masala Munch", "N5", 16, 20, SensorType.CAMERA, "6 min ago", "Maintain current level"),
    ("Colgate Strong Teeth", "O7", 2, 12, SensorType.RFID, "1 min ago", "Emergency restock needed"),
    ("Good Day Cookies", "P4", 12, 24, SensorType.CAMERA, "3 min ago", "Popular evening snack"),
    ("Real Fruit Juice", "Q8", 6, 20, SensorType.RFID, "2 min ago", "Summer demand increasing"),
    ("MDH Garam Masala", "R3", 19, 24, SensorType.CAMERA, "4 min ago", "Essential cooking item"),
]

# 틱마다 무작위로 뽑는 "ML 예측" 문구
PREDICTIONS = [
    "Stock out in 2 hours",
    "Restock by 3 PM",
    "Monitor for weekend",
    "Stable until Thursday",
    "Urgent restock needed",
    "Restock tomorrow",
    "Stock out by noon",
    "Weekly restock cycle",
    "Restock by evening",
    "Stable inventory",
    "Critical - restock ASAP",
    "Restock next week",
    "Weekend demand spike",
    "Maintain current level",
    "Emergency restock needed",
    "Monitor closely",
    "Seasonal demand increase",
    "Normal consumption rate",
    "Peak hours approaching",
    "Bulk purchase detected",
]

# 상품명 → 공급사 (자동 주문 시 사용)
SUPPLIERS = {
    "Coca Cola 12pk": "Coca Cola Distributor",
    "Wonder Bread": "Wonder Bread Supplier",
    "Tide Pods": "P&G Products",
    "Bananas (lb)": "Fresh Produce Co",
    "Milk 2% Gallon": "Dairy Supply Chain",
    "Doritos Nacho": "Frito-Lay Distribution",
    "Cheerios Family Size": "General Mills",
    "iPhone Chargers": "Electronics Wholesale",
}
DEFAULT_SUPPLIER = "Generic Supplier"


def supplier_for(product_name: str) -> str:
    return SUPPLIERS.get(product_name, DEFAULT_SUPPLIER)


def initial_items() -> list[Item]:
    """id 1부터 순서대로 초기 상품 목록 생성 (상태는 재고 비율에서 파생)"""
    return [
        Item(
            id=idx,
            name=name,
            shelf=shelf,
            current_stock=stock,
            max_capacity=capacity,
            sensor=sensor,
            last_update=last_update,
            prediction=prediction,
        )
        for idx, (name, shelf, stock, capacity, sensor, last_update, prediction)
        in enumerate(_SEED_PRODUCTS, start=1)
    ]


def initial_deliveries() -> list[Delivery]:
    """진행 중/완료된 배송 3건. 추적 상품이 아닌 주문은 item_id=None."""
    return [
        Delivery(
            id=1,
            item_id=1,
            product_name="Coca Cola 12pk",
            shelf="A3",
            quantity=48,
            supplier="Coca Cola Distributor",
            order_date=date(2024, 1, 10),
            estimated_delivery=date(2024, 1, 12),
            status=DeliveryStatus.SHIPPED,
            tracking_number="CC123456789",
            priority=DeliveryPriority.HIGH,
            auto_ordered=True,
        ),
        Delivery(
            id=2,
            item_id=2,
            product_name="Wonder Bread",
            shelf="B7",
            quantity=24,
            supplier="Wonder Bread Supplier",
            order_date=date(2024, 1, 11),
            estimated_delivery=date(2024, 1, 13),
            status=DeliveryStatus.PROCESSING,
            priority=DeliveryPriority.MEDIUM,
        ),
        Delivery(
            id=3,
            item_id=None,
            product_name="Milk 2% Gallon",
            shelf="E5",
            quantity=32,
            supplier="Dairy Supply Chain",
            order_date=date(2024, 1, 9),
            estimated_delivery=date(2024, 1, 11),
            actual_delivery=date(2024, 1, 11),
            status=DeliveryStatus.DELIVERED,
            tracking_number="DSC987654321",
            priority=DeliveryPriority.HIGH,
            auto_ordered=True,
        ),
    ]
