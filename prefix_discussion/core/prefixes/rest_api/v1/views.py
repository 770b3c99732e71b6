"""
Prefix API Views
"""
from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ... import api
from .permissions import CanManagePrefixes, CanViewPrefixes
from .serializers import PrefixListSerializer, PrefixSettingsSerializer


class PrefixListView(APIView):
    """
    View to list the prefixes that can currently be applied to discussions.

    **Example Requests**
        GET prefix_discussion/rest_api/v1/prefixes/

    **Query Returns**
        * 200 - Success
        * 403 - Permission denied

    The "no prefix" choice is not part of the list.
    """
    http_method_names = ["get"]
    permission_classes = [CanViewPrefixes]

    def get(self, request: Request, *args, **kwargs) -> Response:
        serializer = PrefixListSerializer({"prefixes": list(api.get_prefixes())})
        return Response(serializer.data)


class PrefixSettingsView(APIView):
    """
    View to read or change the prefix list and its separator.

    **Example Requests**
        GET prefix_discussion/rest_api/v1/settings/
        PUT prefix_discussion/rest_api/v1/settings/
        PATCH prefix_discussion/rest_api/v1/settings/

    **Body Parameters** (PUT requires both, PATCH either)
        * prefixes - The prefix labels, joined by the separator
        * list_separator - The separator (1 to 16 characters)

    **Query Returns**
        * 200 - Success
        * 400 - Invalid body
        * 403 - Permission denied

    Saved values are picked up by server processes as they restart; processes
    that already loaded the prefixes keep the old ones.
    """
    http_method_names = ["get", "put", "patch"]
    permission_classes = [CanManagePrefixes]

    def get(self, request: Request, *args, **kwargs) -> Response:
        serializer = PrefixSettingsSerializer(api.get_prefix_settings())
        return Response(serializer.data)

    def put(self, request: Request, *args, **kwargs) -> Response:
        return self._update(request, partial=False)

    def patch(self, request: Request, *args, **kwargs) -> Response:
        return self._update(request, partial=True)

    def _update(self, request: Request, partial: bool) -> Response:
        body = PrefixSettingsSerializer(data=request.data, partial=partial)
        body.is_valid(raise_exception=True)
        updated = api.update_prefix_settings(**body.validated_data)
        return Response(PrefixSettingsSerializer(updated).data)
