"""
Generic CRUD repository over one table

Subclasses declare the table, its writable columns and the domain model rows
map to. All SQL for a table goes through these methods; every call opens its
own connection, commits writes and closes the connection.
"""
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from bookstore.core.database import get_db_connection_dict

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CrudRepository(Generic[ModelT]):
    """
    Repository for one table

    Attributes:
        table: Table name
        columns: Writable columns (id and timestamps are managed by the database)
        model: Domain model each row is mapped to
    """

    table: str = ""
    columns: Tuple[str, ...] = ()
    model: Type[ModelT]

    @property
    def _select_columns(self) -> str:
        return ", ".join(("id",) + self.columns + ("created_at", "updated_at"))

    def _map_row(self, row: dict) -> ModelT:
        """Map a database row to the domain model"""
        return self.model(**row)

    def _adapt_value(self, column: str, value: Any) -> Any:
        """Hook to convert a Python value before it is sent to the database"""
        return value

    def find_all(self) -> List[ModelT]:
        """
        Get every row in storage order

        Returns:
            List of domain models ordered by id
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._select_columns}
                FROM {self.table}
                ORDER BY id
            """)
            return [self._map_row(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_page(self, limit: int, offset: int) -> List[ModelT]:
        """
        Get one page of rows in storage order

        Args:
            limit: Maximum rows to return
            offset: Number of rows to skip

        Returns:
            List of domain models (empty past the last page)
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._select_columns}
                FROM {self.table}
                ORDER BY id
                LIMIT %s OFFSET %s
            """, (limit, offset))
            return [self._map_row(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Find row by ID

        Returns:
            Domain model or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {self._select_columns}
                FROM {self.table}
                WHERE id = %s
            """, (entity_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row(row)

        finally:
            cursor.close()
            conn.close()

    def exists(self, entity_id: int) -> bool:
        """Check whether a row with this id exists"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                f"SELECT EXISTS (SELECT 1 FROM {self.table} WHERE id = %s) AS found",
                (entity_id,)
            )
            return bool(cursor.fetchone()['found'])

        finally:
            cursor.close()
            conn.close()

    def insert(self, values: Dict[str, Any]) -> ModelT:
        """
        Insert a new row

        Args:
            values: Column -> value for every writable column

        Returns:
            The created row, including its generated id and timestamps
        """
        columns = [c for c in self.columns if c in values]
        placeholders = ", ".join(["%s"] * len(columns))
        params = [self._adapt_value(c, values[c]) for c in columns]

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO {self.table} ({", ".join(columns)})
                VALUES ({placeholders})
                RETURNING {self._select_columns}
            """, params)

            row = cursor.fetchone()
            conn.commit()

            created = self._map_row(row)
            logger.info(f"Inserted {self.table} row id={created.id}")
            return created

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update(self, entity_id: int, values: Dict[str, Any]) -> Optional[ModelT]:
        """
        Overwrite the given columns of one row

        Args:
            entity_id: Row ID
            values: Column -> value, only for the columns to change

        Returns:
            The updated row, or None if no row has this id
        """
        columns = [c for c in self.columns if c in values]
        if not columns:
            return self.find_by_id(entity_id)

        assignments = ", ".join(f"{c} = %s" for c in columns)
        params = [self._adapt_value(c, values[c]) for c in columns]

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                UPDATE {self.table}
                SET {assignments}, updated_at = NOW()
                WHERE id = %s
                RETURNING {self._select_columns}
            """, params + [entity_id])

            row = cursor.fetchone()
            conn.commit()

            if not row:
                return None

            logger.info(f"Updated {self.table} row id={entity_id} ({', '.join(columns)})")
            return self._map_row(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, entity_id: int) -> bool:
        """
        Delete one row

        Returns:
            True if a row was deleted, False if no row has this id
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(
                f"DELETE FROM {self.table} WHERE id = %s RETURNING id",
                (entity_id,)
            )
            deleted = cursor.fetchone() is not None
            conn.commit()

            if deleted:
                logger.info(f"Deleted {self.table} row id={entity_id}")
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
