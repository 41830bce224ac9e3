from dependency_injector import containers, providers
from loan_api.v1_0.repositories import LoanRepository
from loan_api.v1_0.services import LoanService

class APIContainer(containers.DeclarativeContainer):
    # una sola instancia por proceso: es el almacen de los prestamos
    loan_repository = providers.Singleton(LoanRepository)

    loan_service = providers.Singleton(
        LoanService,
        loan_repository = loan_repository
    )
