# apps/core/middleware.py

from .auth_service import auth_service


class PrincipalMiddleware:
    """
    Anexa `request.principal` derivado da sessão

    As views repassam esse principal explicitamente para os serviços;
    visitantes anônimos recebem None. Deve vir depois do
    AuthenticationMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.principal = auth_service.principal_da_requisicao(request)

        response = self.get_response(request)

        if request.principal is not None:
            response['X-Principal'] = request.principal.uid

        return response
