from fastapi import FastAPI

from forestledger.api.routes.health import router as health_router
from forestledger.api.routes.accounts import router as accounts_router
from forestledger.api.routes.account_transactions import router as account_transactions_router
from forestledger.api.routes.reports import router as reports_router


app = FastAPI(title="forestledger API", version="0.1.0")

app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(account_transactions_router)
app.include_router(reports_router)
