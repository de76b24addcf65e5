from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContractTag:
    contract_address: str
    public_name_tag: str
    project_name: str
    ui_website_link: str
    public_note: str
