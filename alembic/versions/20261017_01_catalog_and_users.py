"""
Initial schema: users, actors, films, film_actors.

- `film_actors` has a composite primary key (unique pair) and cascading FKs.
- Check constraints mirror the model layer (non-blank names, rating 0..10, known roles).
"""

from alembic import op
import sqlalchemy as sa

# Revision identifiers, used by Alembic.
revision = "20261017_01_catalog_and_users"
down_revision = None
branch_labels = None
depends_on = None

_pk = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    # --- Users ---
    op.create_table(
        "users",
        sa.Column("id", _pk, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default=sa.text("'default'")),
        sa.CheckConstraint("role IN ('default', 'admin')", name="ck_users_role_known"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    # --- Actors ---
    actor_gender = sa.Enum("male", "female", name="actor_gender")
    op.create_table(
        "actors",
        sa.Column("id", _pk, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=40), nullable=False),
        sa.Column("surname", sa.String(length=40), nullable=False),
        sa.Column("gender", actor_gender, nullable=False),
        sa.Column("birthday", sa.Date(), nullable=False),
        sa.CheckConstraint("length(name) > 0", name="ck_actors_name_not_blank"),
        sa.CheckConstraint("length(surname) > 0", name="ck_actors_surname_not_blank"),
        sa.PrimaryKeyConstraint("id", name="pk_actors"),
    )
    op.create_index("ix_actors_name_surname", "actors", ["name", "surname"], unique=False)

    # --- Films ---
    op.create_table(
        "films",
        sa.Column("id", _pk, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=False),
        sa.Column("date_of_release", sa.Date(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.CheckConstraint("length(name) > 0", name="ck_films_name_not_blank"),
        sa.CheckConstraint("rating >= 0 AND rating <= 10", name="ck_films_rating_range"),
        sa.PrimaryKeyConstraint("id", name="pk_films"),
    )
    op.create_index("ix_films_rating", "films", ["rating"], unique=False)
    op.create_index("ix_films_date_of_release", "films", ["date_of_release"], unique=False)

    # --- Film ⇄ Actor ---
    op.create_table(
        "film_actors",
        sa.Column("film_id", _pk, nullable=False),
        sa.Column("actor_id", _pk, nullable=False),
        sa.ForeignKeyConstraint(["film_id"], ["films.id"], name="fk_film_actors_film_id_films", ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["actor_id"], ["actors.id"], name="fk_film_actors_actor_id_actors", ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("film_id", "actor_id", name="pk_film_actors"),
    )
    op.create_index("ix_film_actors_actor_id", "film_actors", ["actor_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_film_actors_actor_id", table_name="film_actors")
    op.drop_table("film_actors")
    op.drop_index("ix_films_date_of_release", table_name="films")
    op.drop_index("ix_films_rating", table_name="films")
    op.drop_table("films")
    op.drop_index("ix_actors_name_surname", table_name="actors")
    op.drop_table("actors")
    sa.Enum(name="actor_gender").drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
