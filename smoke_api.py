#!/usr/bin/env python3
"""
병원 조회 API 스모크 테스트 스크립트

실행 중인 서버(기본 http://127.0.0.1:8000)에 주요 엔드포인트를 호출하고
결과를 요약합니다.  `manage.py load_hospitals` 로 샘플 데이터를 먼저
적재해 두어야 합니다.
"""
import os
import sys
import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

BASE_URL = os.getenv("SMOKE_BASE_URL", "http://127.0.0.1:8000")
SAMPLE_HOSPITAL = os.getenv("SMOKE_HOSPITAL_ID", "A1100001")


@dataclass
class SmokeResult:
    success: bool
    endpoint: str
    method: str
    status_code: int
    response_time: float
    error_message: str = ""


class SmokeTester:
    def __init__(self):
        self.session = requests.Session()
        self.results: list[SmokeResult] = []
        self.user_id = f"smoke-{uuid.uuid4().hex[:8]}"

    def call(self, method: str, endpoint: str, *, params: Optional[Dict[str, Any]] = None,
             json: Optional[Dict[str, Any]] = None, expected_status: int = 200) -> SmokeResult:
        start_time = time.time()
        try:
            response = self.session.request(
                method, f"{BASE_URL}{endpoint}", params=params, json=json, timeout=10,
            )
        except requests.RequestException as e:
            result = SmokeResult(False, endpoint, method, 0, time.time() - start_time, str(e))
            print(f"❌ {method} {endpoint} - 예외: {e}")
            self.results.append(result)
            return result

        response_time = time.time() - start_time
        ok = response.status_code == expected_status
        result = SmokeResult(
            ok, endpoint, method, response.status_code, response_time,
            "" if ok else response.text[:200],
        )
        mark = "✅" if ok else "❌"
        print(f"{mark} {method} {endpoint} - {response.status_code} ({response_time:.2f}s)")
        self.results.append(result)
        return result

    def run(self) -> bool:
        address = {"address1": "서울특별시", "address2": "동작구"}
        like_body = {"userId": self.user_id, "hospitalId": SAMPLE_HOSPITAL}

        self.call("GET", "/healthz")
        self.call("GET", "/api/hospital/ids")
        self.call("GET", "/api/hospital/detail", params={"hospitalId": SAMPLE_HOSPITAL})
        self.call("GET", "/api/hospital/address", params={**address, "pageNum": 1})
        self.call("GET", "/api/hospital/type", params={**address, "type": "D001", "pageNum": 1})
        self.call("GET", "/api/hospital/address", params={**address, "pageNum": 0}, expected_status=400)
        self.call("POST", "/api/user", json={
            "userId": self.user_id, "userName": "스모크", "userEmail": "smoke@example.com", **address,
        }, expected_status=201)
        self.call("POST", "/api/hospital/like", json=like_body, expected_status=201)
        self.call("POST", "/api/hospital/like", json=like_body, expected_status=409)
        self.call("GET", "/api/hospital/like", params={"userId": self.user_id})
        self.call("DELETE", "/api/hospital/like", json=like_body)
        self.call("DELETE", "/api/hospital/like", json=like_body, expected_status=404)
        self.call("POST", "/api/review", json={
            "userId": self.user_id, "hospitalId": SAMPLE_HOSPITAL, "rating": 5, "content": "친절해요",
        }, expected_status=201)
        self.call("GET", "/api/review", params={"hospitalId": SAMPLE_HOSPITAL})
        if os.getenv("KAKAO_REST_API_KEY"):
            self.call("GET", "/api/hospital/pharmacy", params={"hospitalId": SAMPLE_HOSPITAL})

        failed = [r for r in self.results if not r.success]
        print(f"\n총 {len(self.results)}건, 실패 {len(failed)}건")
        for r in failed:
            print(f"  - {r.method} {r.endpoint}: {r.status_code} {r.error_message}")
        return not failed


def main():
    sys.exit(0 if SmokeTester().run() else 1)


if __name__ == "__main__":
    main()
