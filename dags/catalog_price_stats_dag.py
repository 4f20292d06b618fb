# dags/catalog_price_stats_dag.py
from __future__ import annotations
import math
from datetime import datetime, timedelta
from airflow.decorators import dag, task
from airflow.exceptions import AirflowFailException
from numagg.client import CatalogClient, CatalogError
from numagg.service import price_summary

@dag(
    dag_id="catalog_price_stats",
    start_date=datetime(2025, 1, 1),
    schedule="0 6 * * *",
    catchup=False,
    default_args={"owner": "numagg", "retries": 1, "retry_delay": timedelta(minutes=2)},
    tags=["catalog", "price-stats"],
)
def catalog_price_stats():
    @task(execution_timeout=timedelta(seconds=30))
    def load_stats() -> dict:
        try:
            # reads NUMAGG_CATALOG_PATH / NUMAGG_CATALOG_URL from the task environment
            summary = price_summary(CatalogClient())
        except CatalogError as e:
            raise AirflowFailException(f"load_stats client error: {e}")
        except ValueError as e:
            raise AirflowFailException(f"load_stats parse error: {e}")

        # average() is NaN only for an empty series
        if math.isnan(summary.average):
            raise AirflowFailException("load_stats got an empty catalog")

        return {"name": summary.name, "avg": round(summary.average, 2), "max": summary.biggest}

    @task
    def publish(row: dict) -> None:
        print(f"{row['name']} Average Price: {row['avg']:.2f} Max Price: {row['max']:.2f}")

    publish(load_stats())

dag = catalog_price_stats()
