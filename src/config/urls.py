from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from django.urls import include, path, re_path

from modules.core.views import route_not_found

urlpatterns = [
    path("", include("modules.core.urls")),
    # Domain modules
    re_path(r"^api/products(?:/|$)", include("modules.products.urls")),
    # OpenAPI schema & docs (public)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    # Anything else is answered with the JSON not-found envelope
    re_path(r"^.*$", route_not_found),
]

handler404 = "modules.core.views.route_not_found"
