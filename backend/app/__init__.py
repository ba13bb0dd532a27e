"""
FriendList API: Application Package
======================================

Layers:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, status mapping
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic payloads and records
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← MongoDB repositories
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
