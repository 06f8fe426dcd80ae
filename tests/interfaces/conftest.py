# tests/interfaces/conftest.py
from __future__ import annotations

from typing import Any

import pytest

from consulta_cnpj.application.dtos.empresa_dto import EmpresaDTO
from consulta_cnpj.application.services.mapper import mapear_empresa


@pytest.fixture()
def canonico(raw_empresa: dict[str, Any]) -> dict[str, Any]:
    """Registro exatamente como /api/cnpj serve em `data`."""
    return EmpresaDTO.from_domain(mapear_empresa(raw_empresa)).model_dump(by_alias=True, mode="json")
