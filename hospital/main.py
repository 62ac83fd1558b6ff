"""
Hospital Ward Service - Main Application Entry Point

This is the main FastAPI application that serves as the entry point
for the hospital ward services.

Usage:
    uvicorn hospital.main:app --reload --port 8000
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import health, patients, people, rooms, surgeries
from .config import CORS_ORIGINS, SERVICE_NAME, SERVICE_VERSION, configure_logging
from .core.hospital import Hospital
from .exceptions import HospitalError, status_code_for

logger = logging.getLogger(__name__)


def create_app(hospital: Optional[Hospital] = None) -> FastAPI:
    """建立 FastAPI 應用（測試可傳入自己的 Hospital）"""
    app = FastAPI(
        title=SERVICE_NAME,
        description="醫院病房服務 - 人員登記、病房分配、手術排程與病患報到離院",
        version=SERVICE_VERSION
    )
    app.state.hospital = hospital or Hospital()

    # 配置 CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HospitalError)
    async def hospital_error_handler(request: Request, exc: HospitalError):
        return JSONResponse(
            status_code=status_code_for(exc),
            content={"error": type(exc).__name__, "detail": str(exc)}
        )

    # 註冊 API 路由
    app.include_router(health.router)
    app.include_router(people.router)
    app.include_router(patients.router)
    app.include_router(rooms.router)
    app.include_router(surgeries.router)

    @app.get("/")
    async def root():
        """
        根端點

        Returns:
            基本服務資訊
        """
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "status": "running",
            "docs": "/docs",
            "health": "/api/health",
            "endpoints": {
                "people": "/api/people",
                "patients": "/api/patients",
                "rooms": "/api/rooms",
                "surgeries": "/api/surgeries"
            }
        }

    @app.on_event("startup")
    async def startup_event():
        """應用啟動事件"""
        logger.info(f"{SERVICE_NAME} 啟動中...")
        logger.info("API 文件: http://localhost:8000/docs")

    @app.on_event("shutdown")
    async def shutdown_event():
        """應用關閉事件（資料只存在記憶體，關閉即清空）"""
        logger.info(f"{SERVICE_NAME} 關閉中...")

    return app


configure_logging()
app = create_app()
