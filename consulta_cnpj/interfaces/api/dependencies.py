# consulta_cnpj/interfaces/api/dependencies.py
from fastapi import Request

from consulta_cnpj.application.services.consulta_service import ConsultaCNPJService
from consulta_cnpj.interfaces.web.controller import ConsultaController


def get_consulta_service(request: Request) -> ConsultaCNPJService:
    return request.app.state.consulta_service  # type: ignore[no-any-return]


def get_web_controller(request: Request) -> ConsultaController:
    return request.app.state.web_controller  # type: ignore[no-any-return]
