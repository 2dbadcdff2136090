import pandas as pd
from utils.logger.logger import Logger
from ...models.exceptions import InvalidInputDataError
from ..network.network_factory import NetworkFactory

class DataProcessingStrategy():
    """Interface for converting input files into a `Network2D`.

    Input files hold three tables stacked vertically and separated by blank
    rows: nodes (n_id, n_x, n_y), edges (e_id, n_from, n_to) and metadata
    (key/value pairs). Subclasses only read the file into a DataFrame.
    """

    TABLE_NAMES = ("nodes", "edges", "meta_data")

    def read_frame(self, input_data):
        """Return the raw sheet as a header-less DataFrame."""
        raise NotImplementedError()

    def process(self, input_data):
        """Return a `Network2D` parsed from `input_data` path."""
        Logger.log(f"start process(self, {input_data})")
        try:
            df = self.read_frame(input_data)
        except ValueError as e:
            # pandas parser errors (empty file, bad sheet) are ValueErrors
            Logger.log(f"Error reading {input_data}: {e}", Logger.LogPriority.ERROR)
            raise InvalidInputDataError(f"Unreadable input file: {e}")
        tables = self.split_tables(df)
        try:
            network = NetworkFactory.create_network(tables)
        except ValueError as e:
            Logger.log(f"Error creating network: {e}", Logger.LogPriority.ERROR)
            raise InvalidInputDataError(f"Invalid input data: {e}")
        Logger.log(f"end process(self, input_data)")
        return network

    def split_tables(self, df):
        """Split a header-less DataFrame into column tables keyed by TABLE_NAMES."""
        blocks = []
        current = []
        for _, row in df.iterrows():
            if pd.isna(row.iloc[0]):
                # A run of blank rows closes the current table
                if current:
                    blocks.append(current)
                    current = []
            else:
                current.append(row.dropna().tolist())
        if current:
            blocks.append(current)

        if len(blocks) > len(self.TABLE_NAMES):
            raise InvalidInputDataError(f"Expected at most {len(self.TABLE_NAMES)} tables, found {len(blocks)}.")

        tables = {}
        for name, block in zip(self.TABLE_NAMES, blocks):
            headers = [str(h).strip() for h in block[0]]
            rows = block[1:]
            for row in rows:
                if len(row) != len(headers):
                    raise InvalidInputDataError(f"Row {row} in table '{name}' does not match headers {headers}.")
            if name == "meta_data":
                if len(headers) != 2:
                    raise InvalidInputDataError("Metadata table must have exactly two columns (key, value).")
                tables[name] = {str(row[0]).strip(): row[1] for row in rows}
            else:
                tables[name] = {header: [row[i] for row in rows] for i, header in enumerate(headers)}
            Logger.log(f"Table '{name}' read with {len(rows)} rows")
        return tables
