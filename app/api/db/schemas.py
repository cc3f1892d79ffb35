import sqlalchemy as sa

from app.api.db.database import Base


# Transaction data model
class Transaction(Base):
    __tablename__ = "transactions"

    # internal key, keeps the insertion order of the seed document
    pk = sa.Column(sa.Integer, primary_key=True, autoincrement=True)

    id = sa.Column(sa.Integer, index=True)
    title = sa.Column(sa.String)
    description = sa.Column(sa.Text)
    price = sa.Column(sa.Float)
    category = sa.Column(sa.String, index=True)
    image = sa.Column(sa.String, nullable=True)
    sold = sa.Column(sa.Boolean)
    date_of_sale = sa.Column(sa.DateTime, index=True)
