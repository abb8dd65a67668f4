import logging
import pandas as pd
import numpy as np
import os

from config import CONFIG

logger = logging.getLogger(__name__)

NUMERIC_COLUMNS = ['hit_rate', 'memory_mb', 'seconds', 'size', 'evictions', 'expirations']


class ExcelLogger:
    _file_cleared_this_run = False  # Class variable to ensure file is only cleared once per run

    def __init__(self, filename="cache_metrics.xlsx", workload_order=None):
        self.filename = filename
        self.workload_order = list(workload_order or CONFIG["workload_order"])
        self.records = {}

    def log(self, step, hit_rate, hits, misses, memory_mb, timestamp, size,
            cache_name, workload_name, evictions=0, expirations=0):
        if cache_name not in self.records:
            self.records[cache_name] = []
        self.records[cache_name].append({
            "workload_name": workload_name,
            "step": step,
            "hit_rate": hit_rate,
            "hits": hits,
            "misses": misses,
            "memory_mb": memory_mb,
            "seconds": timestamp,
            "size": size,
            "evictions": evictions,
            "expirations": expirations
        })

    def _prepare(self, df: pd.DataFrame) -> pd.DataFrame:
        # Workloads outside the configured order sort after the known ones
        categories = self.workload_order + sorted(set(df['workload_name']) - set(self.workload_order))
        df = df.drop_duplicates(subset=['workload_name', 'step'], keep='first').copy()
        df['workload_name'] = pd.Categorical(df['workload_name'], categories=categories, ordered=True)
        df = df.sort_values(['workload_name', 'step'], kind='stable')
        for col in NUMERIC_COLUMNS:
            df[col] = df[col].astype(np.float64)
        return df

    def export(self):
        """Write the logged records to the Excel file, one sheet per cache.

        The file is cleared on the first export of a process run; later exports
        merge into the existing sheets, dropping duplicate (workload, step) rows.
        """
        if not self.records:
            logger.info("No records to export to %s", self.filename)
            return
        if not ExcelLogger._file_cleared_this_run and os.path.exists(self.filename):
            os.remove(self.filename)
        ExcelLogger._file_cleared_this_run = True

        float_format = '%.15f'
        if os.path.exists(self.filename):
            existing = pd.read_excel(self.filename, sheet_name=None)
            with pd.ExcelWriter(self.filename, engine='openpyxl', mode='a', if_sheet_exists='replace') as writer:
                for cache_name, records in self.records.items():
                    df = pd.DataFrame(records)
                    if cache_name in existing:
                        df = pd.concat([existing[cache_name], df], ignore_index=True)
                    self._prepare(df).to_excel(writer, sheet_name=cache_name, index=False, float_format=float_format)
        else:
            with pd.ExcelWriter(self.filename, engine='openpyxl') as writer:
                for cache_name, records in self.records.items():
                    df = pd.DataFrame(records)
                    self._prepare(df).to_excel(writer, sheet_name=cache_name, index=False, float_format=float_format)
        logger.info("Exported %d sheet(s) to %s", len(self.records), self.filename)
