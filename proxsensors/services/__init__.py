"""
Services
========
- ExtractionService: one parse-and-name pass over sensors text
- DiscoveryService: topics and payloads for one host
- SensorPublishService: full pass orchestration against a publisher
"""

from proxsensors.services.discovery_service import DiscoveryService
from proxsensors.services.extraction_service import ExtractionResult, ExtractionService, IdCollision
from proxsensors.services.sensor_publish_service import PassReport, SensorPublishService

__all__ = [
    "DiscoveryService",
    "ExtractionResult",
    "ExtractionService",
    "IdCollision",
    "PassReport",
    "SensorPublishService",
]
