import hashlib

from models.integrity_record import IntegrityRecord


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def build_record(url: str, data: bytes) -> IntegrityRecord:
    return IntegrityRecord(url=url, sha256=sha256_hex(data))
