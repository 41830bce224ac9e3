from .loan_router import router as loan_router
defined_routers = [
    loan_router,
    ]
