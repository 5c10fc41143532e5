from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from datagrid import (
    ApiResponse,
    DataService,
    DataTablesError,
    DataTablesRequest,
    DataTablesResponse,
    EntityType,
    create_store,
)
from datagrid.config import Settings, get_settings
from datagrid.logging import configure_logging
from datagrid.models import (
    Customer,
    CustomerCreate,
    CustomerUpdate,
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/appdata")


def get_data_service(request: Request) -> DataService:
    return request.app.state.data_service


# ----------------------
# Employees
# ----------------------
@router.post("/employees", response_model=DataTablesResponse[list[Employee]])
def get_employees(
    datatable_request: DataTablesRequest,
    service: DataService = Depends(get_data_service),
):
    result = service.query(EntityType.EMPLOYEES, datatable_request.to_page_request())
    return result.to_response(datatable_request.draw)


@router.post("/addemp", response_model=ApiResponse)
def add_employee(
    employee: EmployeeCreate, service: DataService = Depends(get_data_service)
):
    return service.add(EntityType.EMPLOYEES, employee).to_response()


@router.put("/updateemp/{id}", response_model=ApiResponse)
def update_employee(
    id: int,
    employee: EmployeeUpdate,
    service: DataService = Depends(get_data_service),
):
    return service.update(EntityType.EMPLOYEES, id, employee).to_response()


@router.delete("/deleteemp/{id}", response_model=ApiResponse)
def delete_employee(id: int, service: DataService = Depends(get_data_service)):
    return service.delete(EntityType.EMPLOYEES, id).to_response()


# ----------------------
# Customers
# ----------------------
@router.post("/customers", response_model=DataTablesResponse[list[Customer]])
def get_customers(
    datatable_request: DataTablesRequest,
    service: DataService = Depends(get_data_service),
):
    result = service.query(EntityType.CUSTOMERS, datatable_request.to_page_request())
    return result.to_response(datatable_request.draw)


@router.post("/addcust", response_model=ApiResponse)
def add_customer(
    customer: CustomerCreate, service: DataService = Depends(get_data_service)
):
    return service.add(EntityType.CUSTOMERS, customer).to_response()


@router.put("/updatecust/{id}", response_model=ApiResponse)
def update_customer(
    id: int,
    customer: CustomerUpdate,
    service: DataService = Depends(get_data_service),
):
    return service.update(EntityType.CUSTOMERS, id, customer).to_response()


@router.delete("/deletecust/{id}", response_model=ApiResponse)
def delete_customer(id: int, service: DataService = Depends(get_data_service)):
    return service.delete(EntityType.CUSTOMERS, id).to_response()


# ----------------------
# FastAPI app
# ----------------------
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.preload_on_startup:
            app.state.data_service.preload()
        logger.info("startup_complete", app=settings.app_name)
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.data_service = DataService(create_store(settings))
    app.include_router(router)

    @app.exception_handler(DataTablesError)
    async def datatables_error_handler(request: Request, exc: DataTablesError):
        logger.warning("request_rejected", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=400, content={"error": str(exc)})

    return app


app = create_app()
