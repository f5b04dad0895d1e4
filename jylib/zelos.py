"""Client for the Zelos vehicle-dispatch open API."""

from __future__ import annotations

import json
import threading
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

import requests

from jylib.zelos_types import (
    AddDispatchRequest,
    AddStopsRequest,
    AppIdKey,
    Auth,
    DeleteStopsRequest,
    Dispatch,
    HttpMethod,
    Org,
    OrgListRequest,
    Page,
    Station,
    StationListRequest,
    Status,
    Stop,
    StopListRequest,
    UpdateStopsRequest,
    Vehicle,
    VehicleDetail,
    VehicleListRequest,
    ZelosError,
)

_API = "/business-server/open-apis"
_TOKEN_PATH = "/app/accessToken"
_TIMEOUT = 5.0


def _parse(body: bytes) -> dict[str, Any]:
    """Decode a response body and raise :class:`ZelosError` if it reports failure."""
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise ValueError(f"json decode error: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError("json decode error: expected an object")
    try:
        status = Status.from_dict(data)
    except TypeError as exc:
        raise ValueError(f"json decode error: {exc}") from exc
    if not status.success:
        raise ZelosError(status.error_code, status.message)
    return dict(data)


def _decode(kind: Any, data: Any, *args: Any) -> Any:
    try:
        return kind.from_dict(data, *args)
    except TypeError as exc:
        raise ValueError(f"json decode error: {exc}") from exc


class ZelosClient:
    """Talks to the API, fetching and caching an access token as needed."""

    def __init__(
        self,
        domain_addr: str,
        app_id: str,
        app_key: str,
        session: requests.Session | None = None,
        timeout: float = _TIMEOUT,
    ):
        self.domain_addr = domain_addr
        self.app_id = app_id
        self.app_key = app_key
        self.auth: Auth | None = None
        self.timeout = timeout
        self._session = session or requests.Session()
        self._auth_lock = threading.Lock()

    def __enter__(self) -> ZelosClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._session.close()

    def org_list(self, req: OrgListRequest) -> tuple[int, list[Org]]:
        """Organisations: the total count and the requested page."""
        query = {"pageNumber": req.page_no, "pageSize": req.page_size}
        return self._page(f"{_API}/organizations", query, Org)

    def station_list(self, req: StationListRequest) -> tuple[int, list[Station]]:
        """Stations of an organisation."""
        query = {
            "pageNumber": req.page_no,
            "pageSize": req.page_size,
            "organizationId": req.org_id,
        }
        return self._page(f"{_API}/stations", query, Station)

    def vehicle_list(self, req: VehicleListRequest) -> tuple[int, list[Vehicle]]:
        """Vehicles of a station."""
        query = {
            "pageNumber": req.page_no,
            "pageSize": req.page_size,
            "stationId": req.station_id,
        }
        return self._page(f"{_API}/vehicles", query, Vehicle)

    def stop_list(self, req: StopListRequest) -> tuple[int, list[Stop]]:
        """Stops of a station."""
        query = {
            "pageNumber": req.page_no,
            "pageSize": req.page_size,
            "stationId": req.station_id,
        }
        return self._page(f"{_API}/stops", query, Stop)

    def vehicle_detail(self, vehicle_name: str) -> VehicleDetail | None:
        """Details of one vehicle, or None if the response carries none."""
        data = _parse(self._request(HttpMethod.GET, f"{_API}/vehicle", {"vehicleName": vehicle_name}))
        detail = data.get("data")
        return None if detail is None else _decode(VehicleDetail, detail)

    def add_dispatch(self, req: AddDispatchRequest) -> Dispatch | None:
        """Create a dispatch task and send the vehicle off."""
        data = _parse(self._request(HttpMethod.PUT, f"{_API}/vehicle/add_dispatch", body=req.to_dict()))
        dispatch = data.get("data")
        return None if dispatch is None else _decode(Dispatch, dispatch)

    def go_dispatch(self, vehicle_name: str) -> None:
        """Restart the current dispatch of a vehicle."""
        self._command(HttpMethod.PUT, f"{_API}/vehicle/go", _vehicle_body(vehicle_name))

    def cancel_dispatch(self, vehicle_name: str) -> None:
        """Cancel the current dispatch of a vehicle."""
        self._command(HttpMethod.PUT, f"{_API}/vehicle/cancel_dispatch", _vehicle_body(vehicle_name))

    def add_stops(self, req: AddStopsRequest) -> None:
        self._command(HttpMethod.PUT, f"{_API}/stop/add", req.to_dict())

    def update_stops(self, req: UpdateStopsRequest) -> None:
        self._command(HttpMethod.PUT, f"{_API}/stop/update", req.to_dict())

    def delete_stops(self, req: DeleteStopsRequest) -> None:
        self._command(HttpMethod.DELETE, f"{_API}/stop/delete", req.to_dict())

    def _page(self, path: str, query: Mapping[str, Any], item_type: type) -> tuple[int, list]:
        data = _parse(self._request(HttpMethod.GET, path, query))
        page = _decode(Page, data.get("data") or {}, item_type)
        return page.total, page.items

    def _command(self, method: HttpMethod, path: str, body: Mapping[str, Any]) -> None:
        _parse(self._request(method, path, body=body))

    def _url(self, path: str) -> str:
        return self.domain_addr.rstrip("/") + path

    def _send(
        self,
        method: HttpMethod,
        path: str,
        query: Mapping[str, Any] | None,
        body: Mapping[str, Any] | None,
        headers: dict[str, str],
    ) -> bytes:
        params = sorted((key, str(value)) for key, value in query.items()) if query else None
        data = None
        if body is not None:
            data = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
            headers = {**headers, "Content-Type": "application/json"}
        response = self._session.request(
            method.value,
            self._url(path),
            params=params,
            data=data,
            headers=headers,
            timeout=self.timeout,
        )
        return response.content

    def _request(
        self,
        method: HttpMethod,
        path: str,
        query: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> bytes:
        token = self._access_token()
        return self._send(method, path, query, body, {"token": token})

    def _access_token(self) -> str:
        with self._auth_lock:
            if self.auth is None or self.auth.expired_at < datetime.now():
                credentials = AppIdKey(app_id=self.app_id, app_key=self.app_key).to_dict()
                body = self._send(HttpMethod.PUT, _TOKEN_PATH, None, credentials, {})
                data = _parse(body).get("data") or {}
                if not isinstance(data, Mapping):
                    raise ValueError("json decode error: data is not an object")
                token = data.get("token") or ""
                token_id = data.get("id") or 0
                expires_after = data.get("expiresAfter") or 0
                if not isinstance(token, str):
                    raise ValueError("json decode error: token is not a string")
                if isinstance(token_id, bool) or not isinstance(token_id, int):
                    raise ValueError("json decode error: id is not an integer")
                if isinstance(expires_after, bool) or not isinstance(expires_after, int):
                    raise ValueError("json decode error: expiresAfter is not an integer")
                self.auth = Auth(
                    id=token_id,
                    token=token,
                    expired_at=datetime.now() + timedelta(minutes=expires_after - 1),
                )
            return self.auth.token


def _vehicle_body(vehicle_name: str) -> dict[str, str]:
    return {"vehicleName": vehicle_name} if vehicle_name else {}