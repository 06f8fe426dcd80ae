# consulta_cnpj/domain/empresa/errors.py
#
# Error taxonomy of a CNPJ lookup.
#
# Design decisions:
#   - Each error carries the HTTP status and the user-facing message it maps to.
#     One exception handler renders every ConsultaError.
#   - `detalhes` holds raw upstream information. It is only exposed when the
#     API runs in debug mode.
from __future__ import annotations


class ConsultaError(Exception):
    status_code: int = 500
    mensagem_padrao: str = "Erro interno do servidor"

    def __init__(self, mensagem: str | None = None, detalhes: str | None = None) -> None:
        self.mensagem = mensagem or self.mensagem_padrao
        self.detalhes = detalhes
        super().__init__(self.mensagem)


class CNPJInvalidoError(ConsultaError):
    """Parametro ausente ou CNPJ malformado. Nunca gera chamada externa."""

    status_code = 400
    mensagem_padrao = "CNPJ inválido"


class LimiteRequisicoesError(ConsultaError):
    status_code = 429
    mensagem_padrao = "Limite de requisições excedido. Tente novamente em 1 minuto."


class UpstreamError(ConsultaError):
    """Falha da API externa. `status`/`body` existem quando houve resposta HTTP."""

    def __init__(
        self,
        mensagem: str | None = None,
        detalhes: str | None = None,
        status: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(mensagem, detalhes)
        self.status = status
        self.body = body

    @classmethod
    def from_status(cls, status: int, body: str) -> UpstreamError:
        """Escolhe a subclasse pelo status HTTP da API externa."""
        if status == 404:
            error_cls: type[UpstreamError] = UpstreamNotFoundError
        elif status == 429:
            error_cls = UpstreamRateLimitedError
        elif status in (502, 503, 504):
            error_cls = UpstreamUnavailableError
        else:
            error_cls = UpstreamError
        return error_cls(
            detalhes=f"API externa retornou status {status}: {body}",
            status=status,
            body=body,
        )


class UpstreamTimeoutError(UpstreamError):
    status_code = 408
    mensagem_padrao = "Timeout na consulta externa"


class UpstreamNotFoundError(UpstreamError):
    status_code = 404
    mensagem_padrao = "Empresa não encontrada"


class UpstreamRateLimitedError(UpstreamError):
    status_code = 429
    mensagem_padrao = "API externa com limite excedido"


class UpstreamUnavailableError(UpstreamError):
    status_code = 503
    mensagem_padrao = "Serviço temporariamente indisponível"


class MappingError(ConsultaError):
    """Registro mapeado sem taxId. O mapper em si nunca levanta."""


class ErroDesconhecidoError(ConsultaError):
    pass
