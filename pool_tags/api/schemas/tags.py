from __future__ import annotations

from pydantic import BaseModel


class ChainResponse(BaseModel):
    chain_id: str


class ContractTagResponse(BaseModel):
    contract_address: str
    public_name_tag: str
    project_name: str
    ui_website_link: str
    public_note: str
