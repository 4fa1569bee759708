"""drf-spectacular extensions for the API's custom building blocks."""

from drf_spectacular.extensions import OpenApiAuthenticationExtension

from modules.core.authentication import API_KEY_HEADER


class ApiKeyAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "modules.core.authentication.ApiKeyAuthentication"
    name = "ApiKeyAuth"

    def get_security_definition(self, auto_schema):
        return {"type": "apiKey", "in": "header", "name": API_KEY_HEADER}
