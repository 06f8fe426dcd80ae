# consulta_cnpj/interfaces/api/routes/web_routes.py
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from consulta_cnpj.interfaces.api.dependencies import get_web_controller
from consulta_cnpj.interfaces.api.middleware.rate_limit import get_client_ip
from consulta_cnpj.interfaces.web.controller import ConsultaController
from consulta_cnpj.interfaces.web.page import renderizar_pagina

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def pagina_consulta(
    request: Request,
    cnpj: str | None = Query(default=None),
    controller: ConsultaController = Depends(get_web_controller),  # noqa: B008
) -> HTMLResponse:
    if cnpj is None:
        return HTMLResponse(renderizar_pagina())
    resultado = await controller.pesquisar(cnpj, client_ip=get_client_ip(request))
    return HTMLResponse(renderizar_pagina(cnpj, resultado))
