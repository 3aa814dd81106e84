from pydantic import BaseModel, ConfigDict, Field


class SecurityHeadersConfig(BaseModel):
    """
    Заголовки безопасности, добавляемые к каждому ответу сервера.
    """
    model_config = ConfigDict(frozen=True)

    content_security_policy: str = Field(
        default=(
            "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
            "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
            "object-src 'none';script-src 'self';script-src-attr 'none';"
            "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
        )
    )
    cross_origin_opener_policy: str = Field(default="same-origin")
    cross_origin_resource_policy: str = Field(default="same-origin")
    origin_agent_cluster: str = Field(default="?1")
    referrer_policy: str = Field(default="same-origin")
    strict_transport_security: str = Field(default="max-age=31536000; includeSubDomains")
    x_content_type_options: str = Field(default="nosniff")
    x_dns_prefetch_control: str = Field(default="off")
    x_download_options: str = Field(default="noopen")
    x_frame_options: str = Field(default="SAMEORIGIN")
    x_permitted_cross_domain_policies: str = Field(default="none")
    x_xss_protection: str = Field(default="0")

    def as_headers(self) -> dict[str, str]:
        """
        Преобразует настройки в набор HTTP заголовков.

        :return: Словарь с именами заголовков и их значениями.
        """
        return {
            "Content-Security-Policy": self.content_security_policy,
            "Cross-Origin-Opener-Policy": self.cross_origin_opener_policy,
            "Cross-Origin-Resource-Policy": self.cross_origin_resource_policy,
            "Origin-Agent-Cluster": self.origin_agent_cluster,
            "Referrer-Policy": self.referrer_policy,
            "Strict-Transport-Security": self.strict_transport_security,
            "X-Content-Type-Options": self.x_content_type_options,
            "X-DNS-Prefetch-Control": self.x_dns_prefetch_control,
            "X-Download-Options": self.x_download_options,
            "X-Frame-Options": self.x_frame_options,
            "X-Permitted-Cross-Domain-Policies": self.x_permitted_cross_domain_policies,
            "X-XSS-Protection": self.x_xss_protection,
        }
