"""JSON-file-backed implementation of DealerRepository.

Accounts and band assignments share one file::

    {"accounts": [...], "band_assignments": [...]}
"""

from __future__ import annotations

from pathlib import Path

from dealer_pricing.domain.model.dealer import (
    DealerAccount,
    DealerBandAssignment,
    DealerStatus,
    Entitlement,
)
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.domain.repository.dealer_repository import DealerRepository
from dealer_pricing.infrastructure.persistence.json_file import JsonFile


class JsonDealerRepository(DealerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={"accounts": [], "band_assignments": []})

    # --- DealerRepository interface -------------------------------------------

    def find_dealer_account(self, dealer_account_id: str) -> DealerAccount | None:
        for raw in self._load_raw()["accounts"]:
            if raw["id"] == dealer_account_id:
                return self._account_to_domain(raw)
        return None

    def find_band_assignment(
        self, dealer_account_id: str, part_type: PartType
    ) -> DealerBandAssignment | None:
        for raw in self._load_raw()["band_assignments"]:
            if (
                raw["dealer_account_id"] == dealer_account_id
                and raw["part_type"] == part_type.value
            ):
                return self._assignment_to_domain(raw)
        return None

    def list_band_assignments(self, dealer_account_id: str) -> list[DealerBandAssignment]:
        return [
            self._assignment_to_domain(raw)
            for raw in self._load_raw()["band_assignments"]
            if raw["dealer_account_id"] == dealer_account_id
        ]

    def save_account(self, account: DealerAccount) -> None:
        data = self._load_raw()
        records = [r for r in data["accounts"] if r["id"] != account.id]
        records.append(self._account_to_raw(account))
        data["accounts"] = records
        self._persist_raw(data)

    def save_band_assignment(self, assignment: DealerBandAssignment) -> None:
        data = self._load_raw()
        # One row per (dealer, part type): replace any existing row.
        records = [
            r for r in data["band_assignments"]
            if not (
                r["dealer_account_id"] == assignment.dealer_account_id
                and r["part_type"] == assignment.part_type.value
            )
        ]
        records.append(self._assignment_to_raw(assignment))
        data["band_assignments"] = records
        self._persist_raw(data)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _account_to_raw(account: DealerAccount) -> dict:
        return {
            "id": account.id,
            "account_no": account.account_no,
            "company_name": account.company_name,
            "entitlement": account.entitlement.value,
            "status": account.status.value,
        }

    @staticmethod
    def _account_to_domain(raw: dict) -> DealerAccount:
        return DealerAccount(
            id=raw["id"],
            account_no=raw["account_no"],
            company_name=raw.get("company_name", ""),
            entitlement=Entitlement(raw.get("entitlement", "SHOW_ALL")),
            status=DealerStatus(raw.get("status", "ACTIVE")),
        )

    @staticmethod
    def _assignment_to_raw(assignment: DealerBandAssignment) -> dict:
        return {
            "dealer_account_id": assignment.dealer_account_id,
            "part_type": assignment.part_type.value,
            "band_code": assignment.band_code,
        }

    @staticmethod
    def _assignment_to_domain(raw: dict) -> DealerBandAssignment:
        return DealerBandAssignment(
            dealer_account_id=raw["dealer_account_id"],
            part_type=PartType(raw["part_type"]),
            band_code=str(raw["band_code"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        data = self._file.read()
        data.setdefault("accounts", [])
        data.setdefault("band_assignments", [])
        return data

    def _persist_raw(self, data: dict) -> None:
        self._file.write(data)
