from dependency_injector import containers, providers
from loan_api.v1_0.v1_containers import APIContainer

class ApplicationContainer(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
                "loan_api.v1_0.routers.loan_router",
            ]
    )

    api_container = providers.Container(
        APIContainer
    )
