"""
Throwaway controllers exercising `CoreController` hooks in isolation.

Mounted with `@override_settings(ROOT_URLCONF="core.tests.urls")`.
"""

from __future__ import annotations

from django.urls import path
from rest_framework import serializers
from rest_framework.renderers import BaseRenderer, JSONRenderer, TemplateHTMLRenderer
from rest_framework.response import Response

from core.controllers import CoreController


class PlainTextRenderer(BaseRenderer):
    media_type = "text/plain"
    format = "txt"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        return "" if data is None else str(data)


class PageParamsSerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1)


class ParamsController(CoreController):
    renderer_classes = [TemplateHTMLRenderer, JSONRenderer]
    params_serializer_class = PageParamsSerializer

    def get(self, request, *args, **kwargs):
        return Response({"page": self.params["page"]}, template_name="main.html")

    def post(self, request, *args, **kwargs):
        return Response({"page": self.params["page"]})


class JsonFirstController(ParamsController):
    response_content_type = "application/json; charset=utf-8"


class TextController(CoreController):
    renderer_classes = [PlainTextRenderer]
    params_serializer_class = PageParamsSerializer

    def get(self, request, *args, **kwargs):
        return Response("ok")


class StatusController(CoreController):
    renderer_classes = [JSONRenderer]

    def get(self, request, code: int, *args, **kwargs):
        return Response(status=code)

    def post(self, request, code: int, *args, **kwargs):
        return Response(status=code)


class BoomController(CoreController):
    renderer_classes = [JSONRenderer]

    def get(self, request, *args, **kwargs):
        raise RuntimeError("boom")


class AnonymousController(CoreController):
    """No DRF authentication, so the session is never touched."""
    renderer_classes = [JSONRenderer]
    authentication_classes: list = []

    def get(self, request, *args, **kwargs):
        return Response({})


class SecureController(AnonymousController):
    controller_name = "Secure"


class HtmlOnlyController(AnonymousController):
    acceptable_formats = "HTML"


class OwnVaryController(AnonymousController):
    def get(self, request, *args, **kwargs):
        return Response({}, headers={"Vary": "Accept-Encoding"})


urlpatterns = [
    path("params", ParamsController.as_view()),
    path("json-first", JsonFirstController.as_view()),
    path("text", TextController.as_view()),
    path("status/<int:code>", StatusController.as_view()),
    path("boom", BoomController.as_view()),
    path("anonymous", AnonymousController.as_view()),
    path("login", SecureController.as_view()),
    path("own-vary", OwnVaryController.as_view()),
    path("html-only", HtmlOnlyController.as_view()),
]
