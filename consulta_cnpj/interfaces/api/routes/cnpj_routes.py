# consulta_cnpj/interfaces/api/routes/cnpj_routes.py
from fastapi import APIRouter, Depends, Query, Response

from consulta_cnpj.application.dtos.empresa_dto import ConsultaResponseDTO, EmpresaDTO
from consulta_cnpj.application.services.consulta_service import ConsultaCNPJService
from consulta_cnpj.interfaces.api.dependencies import get_consulta_service

router = APIRouter()


@router.options("/cnpj")
def preflight() -> Response:
    return Response(status_code=200)


@router.get("/cnpj", response_model=ConsultaResponseDTO)
async def consultar_cnpj(
    cnpj: str | None = Query(default=None),
    service: ConsultaCNPJService = Depends(get_consulta_service),  # noqa: B008
) -> ConsultaResponseDTO:
    resultado = await service.consultar(cnpj)
    return ConsultaResponseDTO(
        data=EmpresaDTO.from_domain(resultado.empresa),
        cached=resultado.cached,
    )
