import asyncio
import os
import sys

# Add the project root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy import text
from app.core.database import AsyncSessionLocal, dispose_engine, init_db

# 关联表在前，保证外键约束下的删除顺序
TABLES = ["order_product", "orders", "products", "categories", "accounts"]


async def reset_store():
    """
    重置商城数据脚本
    作用：
    1. 确保表结构存在
    2. 按外键依赖顺序清空订单关联、订单、商品、分类、账户
    3. 重置相关的主键序列 (ID 从 1 开始)
    注意：运行中的服务进程内有缓存，清空数据后需要重启服务。
    """
    print("🗑️  开始清理商城数据...")
    await init_db()
    async with AsyncSessionLocal() as db:
        try:
            for table in TABLES:
                print(f"   - 正在清空 {table} ...")
                await db.execute(text(f"DELETE FROM {table}"))

            if db.bind.dialect.name == "postgresql":
                print("   - 正在重置 ID 序列...")
                for table in TABLES[1:]:
                    await db.execute(text(f"ALTER SEQUENCE {table}_id_seq RESTART WITH 1"))

            await db.commit()
            print("✅ 商城数据已清空。")

        except Exception as e:
            await db.rollback()
            print(f"❌ 重置失败: {e}")

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(reset_store())
