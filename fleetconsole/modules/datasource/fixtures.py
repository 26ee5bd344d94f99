"""Sample records served when the console runs without a backend."""

from typing import Any

DEMO_VEHICLES: list[dict[str, Any]] = [
    {
        "id": "1",
        "plateNumber": "FL-001",
        "make": "Ford",
        "model": "Transit",
        "year": 2021,
        "status": "active",
        "mileage": 45230,
        "fuelType": "gasoline",
        "lastMaintenance": "2024-01-20",
        "currentDriver": "John Smith",
    },
    {
        "id": "2",
        "plateNumber": "FL-002",
        "make": "Mercedes",
        "model": "Sprinter",
        "year": 2022,
        "status": "maintenance",
        "mileage": 23450,
        "fuelType": "diesel",
        "lastMaintenance": "2024-01-28",
        "currentDriver": "Sarah Johnson",
    },
    {
        "id": "3",
        "plateNumber": "FL-003",
        "make": "Isuzu",
        "model": "NPR",
        "year": 2019,
        "status": "active",
        "mileage": 67890,
        "fuelType": "diesel",
        "lastMaintenance": "2024-01-20",
        "currentDriver": None,
    },
]

DEMO_DRIVERS: list[dict[str, Any]] = [
    {
        "id": "1",
        "employeeId": "EMP001",
        "firstName": "John",
        "lastName": "Smith",
        "email": "john.smith@fleet.com",
        "phone": "555-0101",
        "status": "active",
        "availability": "on-duty",
        "licenseNumber": "DL-483920",
        "hireDate": "2020-03-15",
    },
    {
        "id": "2",
        "employeeId": "EMP002",
        "firstName": "Sarah",
        "lastName": "Johnson",
        "email": "sarah.johnson@fleet.com",
        "phone": "555-0102",
        "status": "active",
        "availability": "available",
        "licenseNumber": "DL-572019",
        "hireDate": "2021-07-01",
    },
    {
        "id": "3",
        "employeeId": "EMP003",
        "firstName": "Mike",
        "lastName": "Wilson",
        "email": "mike.wilson@fleet.com",
        "phone": None,
        "status": "inactive",
        "availability": "off-duty",
        "licenseNumber": None,
        "hireDate": "2019-11-20",
    },
]

DEMO_FUEL_LOGS: list[dict[str, Any]] = [
    {
        "id": "1",
        "vehicle": {"plateNumber": "FL-001", "make": "Ford", "model": "Transit"},
        "driver": {"firstName": "John", "lastName": "Smith"},
        "date": "2024-01-25",
        "time": "14:30",
        "fuelType": "gasoline",
        "quantity": {"amount": 45.5, "unit": "liters"},
        "cost": {"pricePerUnit": 1.45, "totalAmount": 65.98, "currency": "USD"},
        "odometer": {"reading": 45230, "unit": "km"},
        "location": {"stationName": "Shell Station", "address": "123 Main St"},
        "isFillUp": True,
        "status": "approved",
    },
    {
        "id": "2",
        "vehicle": {"plateNumber": "FL-002", "make": "Mercedes", "model": "Sprinter"},
        "driver": {"firstName": "Sarah", "lastName": "Johnson"},
        "date": "2024-01-24",
        "time": "09:15",
        "fuelType": "diesel",
        "quantity": {"amount": 38.2, "unit": "liters"},
        "cost": {"pricePerUnit": 1.52, "totalAmount": 58.06, "currency": "USD"},
        "odometer": {"reading": 23450, "unit": "km"},
        "location": {"stationName": "BP Station", "address": "456 Oak Ave"},
        "isFillUp": False,
        "status": "pending",
    },
    {
        "id": "3",
        "vehicle": {"plateNumber": "FL-003", "make": "Isuzu", "model": "NPR"},
        "driver": {"firstName": "Mike", "lastName": "Wilson"},
        "date": "2024-01-23",
        "time": "16:45",
        "fuelType": "diesel",
        "quantity": {"amount": 52.8, "unit": "liters"},
        "cost": {"pricePerUnit": 1.48, "totalAmount": 78.14, "currency": "USD"},
        "odometer": {"reading": 67890, "unit": "km"},
        "location": {"stationName": "Exxon Station", "address": "789 Pine St"},
        "isFillUp": True,
        "status": "approved",
    },
]

DEMO_MAINTENANCE_RECORDS: list[dict[str, Any]] = [
    {
        "_id": "1",
        "vehicle": {"plateNumber": "FL-001", "make": "Ford", "model": "Transit"},
        "type": "scheduled",
        "category": "oil-change",
        "title": "Oil Change Service",
        "description": "Regular oil change and filter replacement",
        "status": "scheduled",
        "priority": "medium",
        "scheduledDate": "2024-02-01",
        "estimatedCost": 85.00,
        "odometer": {"reading": 45000, "unit": "km"},
        "serviceProvider": "AutoCare Center",
    },
    {
        "_id": "2",
        "vehicle": {"plateNumber": "FL-002", "make": "Mercedes", "model": "Sprinter"},
        "type": "repair",
        "category": "brake-system",
        "title": "Brake Pad Replacement",
        "description": "Front brake pads need replacement",
        "status": "in-progress",
        "priority": "high",
        "scheduledDate": "2024-01-28",
        "estimatedCost": 320.00,
        "actualCost": 285.00,
        "odometer": {"reading": 23500, "unit": "km"},
        "serviceProvider": "Brake Specialists Inc",
    },
    {
        "_id": "3",
        "vehicle": {"plateNumber": "FL-003", "make": "Isuzu", "model": "NPR"},
        "type": "inspection",
        "category": "annual-inspection",
        "title": "Annual Safety Inspection",
        "description": "Mandatory annual vehicle safety inspection",
        "status": "completed",
        "priority": "high",
        "scheduledDate": "2024-01-20",
        "completedDate": "2024-01-20",
        "estimatedCost": 150.00,
        "actualCost": 150.00,
        "odometer": {"reading": 67800, "unit": "km"},
        "serviceProvider": "State Inspection Center",
    },
]

DEMO_RECORDS: dict[str, list[dict[str, Any]]] = {
    "vehicles": DEMO_VEHICLES,
    "drivers": DEMO_DRIVERS,
    "fuel": DEMO_FUEL_LOGS,
    "maintenance": DEMO_MAINTENANCE_RECORDS,
}
